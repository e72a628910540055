"""Abstract base class for cache service providers.

Defines the contract for the key-value cache that fronts the streams API.
Implementations may use Redis, an in-process TTL cache, or nothing at all;
the backend is chosen once at startup and callers never branch on whether
a cache is actually connected.

Contract: no method raises.  Backend failures are logged by the provider
and surface only as a miss (``get`` -> ``None``) or a failed store
(``set`` -> ``False``).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager


class ICacheProvider(ABC):
    """Contract for key-value cache services.

    All operations are async to allow for network-backed stores (e.g. Redis)
    without blocking the event loop.
    """

    @abstractmethod
    async def get(self, key: str) -> bytes | None:
        """Retrieve the value stored under *key*.

        Parameters
        ----------
        key:
            The cache key to look up.

        Returns
        -------
        bytes or None
            The cached bytes if present and not expired; ``None`` on a miss
            or when the backend is unreachable.
        """

    @abstractmethod
    async def set(self, key: str, value: bytes, ttl: int) -> bool:
        """Store *value* under *key* for *ttl* seconds.

        Parameters
        ----------
        key:
            The cache key.
        value:
            The serialized response bytes.
        ttl:
            Time-to-live in seconds.

        Returns
        -------
        bool
            ``True`` if the value was stored, ``False`` otherwise.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a short identifier for this cache backend."""

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[ICacheProvider]:
        """Scope a backend connection to one request.

        Yields the provider to use for the request and releases whatever
        connection it holds on exit, including exit by exception.  In-process
        backends hold no connection and yield themselves.
        """
        yield self
