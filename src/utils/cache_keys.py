"""Deterministic cache keys for filtered stream queries."""

from __future__ import annotations

import hashlib
import json

from src.models.stream import FilterQuery

DEFAULT_PREFIX = "twitch_carousel:"
_DIGEST_LENGTH = 20


def build_cache_key(query: FilterQuery, prefix: str = DEFAULT_PREFIX) -> str:
    """Return the namespaced cache key for *query*.

    Term sets are sorted before hashing so the order terms were typed in
    does not matter.  ``page_size`` is left out: it is derived from
    ``limit`` and the server configuration, not from the request.

    >>> build_cache_key(FilterQuery(game_id="494131", limit=24)).startswith(
    ...     "twitch_carousel:streams:")
    True
    """
    payload = json.dumps(
        {
            "g": query.game_id,
            "kw": sorted(query.keyword_terms),
            "tags": sorted(query.tag_terms),
            "limit": query.limit,
        },
        ensure_ascii=False,
        separators=(",", ":"),
    )
    digest = hashlib.sha1(payload.encode("utf-8")).hexdigest()[:_DIGEST_LENGTH]
    return f"{prefix}streams:{digest}"
