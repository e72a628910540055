"""In-memory cache provider using cachetools.TTLCache.

Suitable for development and single-process deployments; every worker
process keeps its own copy.  Use the Redis provider when several workers
should share cached responses.
"""

from __future__ import annotations

import structlog
from cachetools import TTLCache

from src.interfaces.cache_provider import ICacheProvider

logger = structlog.get_logger(logger_name=__name__)


class MemoryCacheProvider(ICacheProvider):
    """In-memory TTL cache backed by ``cachetools.TTLCache``.

    Parameters
    ----------
    max_size:
        Maximum number of entries before the least-recently-used entry
        is evicted.
    ttl:
        Time-to-live in seconds applied to every entry.
    """

    def __init__(self, max_size: int = 256, ttl: int = 300) -> None:
        self._ttl = ttl
        self._cache: TTLCache[str, bytes] = TTLCache(maxsize=max_size, ttl=ttl)

    async def get(self, key: str) -> bytes | None:
        """Return the cached bytes for *key*, or ``None`` if missing/expired."""
        return self._cache.get(key) or None

    async def set(self, key: str, value: bytes, ttl: int) -> bool:
        """Store *value* under *key*.

        ``TTLCache`` applies the TTL given at construction to every entry,
        so a *ttl* that differs from it is logged and otherwise ignored.
        """
        if ttl != self._ttl:
            logger.debug("memory_cache_ttl_ignored", key=key, requested=ttl, applied=self._ttl)
        self._cache[key] = value
        return True

    def get_provider_name(self) -> str:
        return "memory"

    def __len__(self) -> int:
        return len(self._cache)
