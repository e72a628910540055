"""Cache providers.

Three interchangeable implementations of ICacheProvider, picked once at
startup from ``CACHE_BACKEND``:

    redis   -- RedisCacheProvider, shared across worker processes
    memory  -- MemoryCacheProvider, per-process cachetools TTL cache
    none    -- NullCacheProvider, caching disabled
"""

from src.providers.cache.memory_cache import MemoryCacheProvider
from src.providers.cache.null_cache import NullCacheProvider
from src.providers.cache.redis_cache import RedisCacheProvider

__all__ = ["MemoryCacheProvider", "NullCacheProvider", "RedisCacheProvider"]
