"""No-op cache provider used when caching is disabled or unreachable."""

from __future__ import annotations

from src.interfaces.cache_provider import ICacheProvider


class NullCacheProvider(ICacheProvider):
    """Every lookup misses and every store is dropped."""

    async def get(self, key: str) -> bytes | None:
        return None

    async def set(self, key: str, value: bytes, ttl: int) -> bool:
        return False

    def get_provider_name(self) -> str:
        return "none"
