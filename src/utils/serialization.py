"""JSON encoding for API payloads.

Output is compact UTF-8 with non-ASCII characters and forward slashes left
as-is, so thumbnail URLs and localized tag names stay readable in the raw
body.  The same bytes are written to the cache and replayed verbatim on a
hit.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from src.models.stream import CarouselStream

JSON_MEDIA_TYPE = "application/json; charset=utf-8"


def encode_json(payload: Any) -> bytes:
    """Encode *payload* as compact UTF-8 JSON bytes."""
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def serialize_streams(items: Iterable[CarouselStream]) -> bytes:
    """Render the ``{"count": n, "items": [...]}`` envelope."""
    rendered = [item.model_dump(mode="json") for item in items]
    return encode_json({"count": len(rendered), "items": rendered})
