"""Redis cache provider using ``redis.asyncio``.

A connection is opened for each request inside :meth:`RedisCacheProvider.acquire`
and closed when the request finishes.  Connecting, authenticating and
selecting the database all happen on the first ``PING``; if any of that
fails the request runs with a :class:`NullCacheProvider` instead, so a Redis
outage costs extra upstream calls but never a failed response.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from src.config.settings import Settings
from src.interfaces.cache_provider import ICacheProvider
from src.providers.cache.null_cache import NullCacheProvider
from src.utils.errors import CacheError
from src.utils.logging import get_logger

logger = get_logger(__name__)

_PROVIDER_NAME = "redis"


class RedisCacheProvider(ICacheProvider):
    """Cache backed by a Redis server.

    Parameters
    ----------
    host, port:
        Redis server address.
    password:
        ``AUTH`` password; an empty string skips authentication.
    db:
        Database index to ``SELECT``; ``None`` keeps the server default.
    connect_timeout:
        Seconds allowed for connecting and for each command.
    """

    def __init__(
        self,
        host: str = "127.0.0.1",
        port: int = 6379,
        password: str = "",
        db: int | None = 0,
        connect_timeout: float = 1.5,
    ) -> None:
        self._host = host
        self._port = port
        self._password = password
        self._db = db
        self._connect_timeout = connect_timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> RedisCacheProvider:
        return cls(
            host=settings.redis_host,
            port=settings.redis_port,
            password=settings.redis_password,
            db=settings.redis_db,
            connect_timeout=settings.redis_connect_timeout,
        )

    # ------------------------------------------------------------------
    # Connection handling
    # ------------------------------------------------------------------

    def _create_client(self) -> aioredis.Redis:
        return aioredis.Redis(
            host=self._host,
            port=self._port,
            password=self._password or None,
            db=self._db if self._db is not None else 0,
            socket_connect_timeout=self._connect_timeout,
            socket_timeout=self._connect_timeout,
        )

    async def _connect(self, client: aioredis.Redis) -> None:
        """Verify the connection; raises :class:`CacheError` on failure."""
        try:
            await client.ping()
        except (RedisError, OSError) as exc:
            raise CacheError(
                message=f"redis connect failed: {exc}",
                provider_name=_PROVIDER_NAME,
            ) from exc

    @staticmethod
    async def _close(client: aioredis.Redis) -> None:
        try:
            await client.aclose()
        except (RedisError, OSError) as exc:
            logger.warning("cache_close_failed", provider=_PROVIDER_NAME, error=str(exc))

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[ICacheProvider]:
        client = self._create_client()
        session: ICacheProvider
        try:
            await self._connect(client)
            session = _RedisSession(client)
        except CacheError as exc:
            logger.warning(
                "cache_unavailable",
                provider=_PROVIDER_NAME,
                host=self._host,
                port=self._port,
                error=exc.message,
            )
            session = NullCacheProvider()
        try:
            yield session
        finally:
            await self._close(client)

    # ------------------------------------------------------------------
    # ICacheProvider implementation (outside a request scope)
    # ------------------------------------------------------------------

    async def get(self, key: str) -> bytes | None:
        """One-off lookup on a short-lived connection."""
        async with self.acquire() as session:
            return await session.get(key)

    async def set(self, key: str, value: bytes, ttl: int) -> bool:
        """One-off store on a short-lived connection."""
        async with self.acquire() as session:
            return await session.set(key, value, ttl)

    def get_provider_name(self) -> str:
        return _PROVIDER_NAME


class _RedisSession(ICacheProvider):
    """Request-scoped view over an open Redis connection."""

    def __init__(self, client: aioredis.Redis) -> None:
        self._client = client

    async def get(self, key: str) -> bytes | None:
        try:
            value = await self._client.get(key)
        except (RedisError, OSError) as exc:
            logger.warning("cache_read_failed", provider=_PROVIDER_NAME, key=key, error=str(exc))
            return None
        if not value:
            return None
        if isinstance(value, str):
            return value.encode("utf-8")
        return value

    async def set(self, key: str, value: bytes, ttl: int) -> bool:
        try:
            await self._client.set(key, value, ex=ttl)
        except (RedisError, OSError) as exc:
            logger.warning("cache_store_failed", provider=_PROVIDER_NAME, key=key, error=str(exc))
            return False
        return True

    def get_provider_name(self) -> str:
        return _PROVIDER_NAME
