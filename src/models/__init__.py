"""Domain models for the stream carousel service."""

from src.models.stream import CarouselStream, FilterQuery, StreamPage, StreamRecord

__all__ = ["CarouselStream", "FilterQuery", "StreamPage", "StreamRecord"]
