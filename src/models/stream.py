"""Pydantic v2 models for live-stream data and filter queries.

All models use frozen config (immutable).  ``StreamRecord`` mirrors one
element of the Helix ``GET /streams`` ``data`` array; ``CarouselStream`` is
the projection the carousel widget consumes, and its field names are a wire
contract with the frontend.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from src.config.settings import HELIX_MAX_PAGE_SIZE


class StreamRecord(BaseModel):
    """A single live stream as returned by the streams API."""

    model_config = ConfigDict(frozen=True)

    user_login: str = Field(default="", description="Stable account handle, used for dedup.")
    user_name: str = Field(default="", description="Display name; may vary in casing.")
    title: str = Field(default="", description="Free-text stream title.")
    thumbnail_url: str = Field(
        default="",
        description="Thumbnail URL template containing a literal '{width}x{height}'.",
    )
    tags: list[str] = Field(default_factory=list, description="Tag names in display order.")

    @classmethod
    def from_helix(cls, item: dict[str, Any]) -> StreamRecord:
        """Parse one element of a Helix ``data`` array.

        Missing strings become ``""``.  ``user_name`` falls back to
        ``user_login``.  A ``tags`` value that is not a list (Helix sends
        ``null`` for untagged streams) is read as no tags.
        """
        user_login = _as_str(item.get("user_login"))
        user_name = item.get("user_name")
        if user_name is None:
            user_name = user_login

        raw_tags = item.get("tags")
        tags = [str(tag) for tag in raw_tags if tag is not None] if isinstance(raw_tags, list) else []

        return cls(
            user_login=user_login,
            user_name=_as_str(user_name),
            title=_as_str(item.get("title")),
            thumbnail_url=_as_str(item.get("thumbnail_url")),
            tags=tags,
        )


class StreamPage(BaseModel):
    """One page of streams plus the continuation cursor.

    ``cursor`` is ``None`` on the last page.
    """

    model_config = ConfigDict(frozen=True)

    records: list[StreamRecord] = Field(default_factory=list)
    cursor: str | None = None


class CarouselStream(BaseModel):
    """A stream accepted by the filters, as delivered to the carousel."""

    model_config = ConfigDict(frozen=True)

    user_name: str
    user_login: str
    title: str
    thumbnail_url: str
    tags: list[str] = Field(default_factory=list)

    @classmethod
    def from_record(cls, record: StreamRecord) -> CarouselStream:
        return cls(
            user_name=record.user_name,
            user_login=record.user_login,
            title=record.title,
            thumbnail_url=record.thumbnail_url,
            tags=list(record.tags),
        )


class FilterQuery(BaseModel):
    """A fully normalized streams request.

    ``page_size`` is how many streams to ask the upstream for per page:
    never more than ``limit`` and never more than the Helix maximum.
    """

    model_config = ConfigDict(frozen=True)

    game_id: str = Field(min_length=1)
    keyword_terms: frozenset[str] = Field(default_factory=frozenset)
    tag_terms: frozenset[str] = Field(default_factory=frozenset)
    limit: int = Field(default=20, ge=1)
    page_size: int = Field(default=20, ge=1, le=HELIX_MAX_PAGE_SIZE)


def _as_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value)
