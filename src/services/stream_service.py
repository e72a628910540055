"""Cache-aside request flow for the streams endpoint.

Request flow:
  1. NORMALIZE -- validate ``game_id`` and parse the filter strings into a
                  :class:`FilterQuery`.  A missing ``game_id`` fails here,
                  before the cache or the upstream is touched.
  2. LOOKUP    -- derive the cache key and ask the cache.  A hit returns
                  the stored bytes untouched.
  3. COLLECT   -- on a miss, run the :class:`StreamCollector` page loop.
                  Upstream errors propagate and nothing is stored.
  4. SERIALIZE -- render ``{"count", "items"}`` as JSON bytes.
  5. STORE     -- best-effort write with the configured TTL.

Concurrent misses for the same key each go to the upstream; the TTL
bounds how often that can happen.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from src.config.settings import HELIX_MAX_PAGE_SIZE
from src.interfaces.cache_provider import ICacheProvider
from src.models.stream import FilterQuery
from src.services.stream_collector import StreamCollector
from src.utils.cache_keys import DEFAULT_PREFIX, build_cache_key
from src.utils.errors import ClientInputError
from src.utils.logging import get_logger
from src.utils.serialization import serialize_streams
from src.utils.text_normalizer import DEFAULT_LIMIT, parse_limit, parse_terms

logger: structlog.BoundLogger = get_logger(__name__)

DEFAULT_CACHE_TTL_SECONDS = 300
MISSING_GAME_ID = "Missing required parameter: game_id"


@dataclass(frozen=True)
class StreamsResult:
    """Serialized response body plus whether it came from the cache."""

    body: bytes
    cache_hit: bool
    cache_key: str


def build_filter_query(
    game_id: str | None,
    keywords: str | None = None,
    tags: str | None = None,
    limit: str | None = None,
    max_page_size: int = 50,
) -> FilterQuery:
    """Normalize raw query-string values into a :class:`FilterQuery`.

    Raises
    ------
    ClientInputError
        If *game_id* is absent or blank after trimming.
    """
    game_id = (game_id or "").strip()
    if not game_id:
        raise ClientInputError(MISSING_GAME_ID)

    resolved_limit = parse_limit(limit, default=DEFAULT_LIMIT)
    page_cap = max(1, min(max_page_size, HELIX_MAX_PAGE_SIZE))
    return FilterQuery(
        game_id=game_id,
        keyword_terms=parse_terms(keywords),
        tag_terms=parse_terms(tags),
        limit=resolved_limit,
        page_size=min(resolved_limit, page_cap),
    )


class StreamService:
    """Serves filtered stream lists, fronted by a cache.

    Parameters
    ----------
    collector:
        Page loop used on cache misses.
    cache_ttl:
        Seconds a stored response stays fresh.
    key_prefix:
        Namespace prepended to every cache key.
    max_page_size:
        Upper bound for the per-page request size.
    """

    def __init__(
        self,
        collector: StreamCollector,
        cache_ttl: int = DEFAULT_CACHE_TTL_SECONDS,
        key_prefix: str = DEFAULT_PREFIX,
        max_page_size: int = 50,
    ) -> None:
        self._collector = collector
        self._cache_ttl = cache_ttl
        self._key_prefix = key_prefix
        self._max_page_size = max_page_size

    def build_query(
        self,
        game_id: str | None,
        keywords: str | None = None,
        tags: str | None = None,
        limit: str | None = None,
    ) -> FilterQuery:
        return build_filter_query(
            game_id, keywords, tags, limit, max_page_size=self._max_page_size
        )

    async def get_streams(self, query: FilterQuery, cache: ICacheProvider) -> StreamsResult:
        """Return the serialized envelope for *query*, from cache when fresh.

        Raises
        ------
        src.utils.errors.UpstreamError
            If any upstream page fails.  The cache is not written.
        """
        cache_key = build_cache_key(query, prefix=self._key_prefix)

        cached = await cache.get(cache_key)
        if cached:
            logger.info("cache_hit", key=cache_key, backend=cache.get_provider_name())
            return StreamsResult(body=cached, cache_hit=True, cache_key=cache_key)
        logger.info("cache_miss", key=cache_key, backend=cache.get_provider_name())

        items = await self._collector.collect(query)
        body = serialize_streams(items)

        stored = await cache.set(cache_key, body, self._cache_ttl)
        logger.debug("cache_store", key=cache_key, stored=stored, count=len(items))
        return StreamsResult(body=body, cache_hit=False, cache_key=cache_key)
