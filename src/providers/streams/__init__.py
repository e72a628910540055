"""Live-stream listing providers (implementations of IStreamProvider)."""

from src.providers.streams.helix_provider import HelixStreamsProvider

__all__ = ["HelixStreamsProvider"]
