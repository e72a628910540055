"""Pydantic response schemas for the stream carousel API.

The streams endpoint writes its JSON body directly (so cached bytes can be
replayed verbatim); ``StreamListResponse`` documents that body's shape in
the OpenAPI schema and is used by tests to validate it.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from src.models.stream import CarouselStream


class StreamListResponse(BaseModel):
    """Filtered live streams, in upstream order."""

    count: int = Field(ge=0)
    items: list[CarouselStream] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Error envelope.  ``http_code``/``detail`` only appear for upstream failures."""

    error: str
    http_code: int | None = None
    detail: str | None = None


class HealthResponse(BaseModel):
    """Application health check response."""

    status: str
    version: str
    cache_backend: str
    upstream_configured: bool


class CarouselConfigResponse(BaseModel):
    """Start-up configuration for the carousel widget."""

    game_id: str
    keywords: str
    tags: str
    colors: dict[str, str]
    css_variables: dict[str, str]
    streams_endpoint: str
