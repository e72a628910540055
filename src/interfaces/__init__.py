"""Public interface definitions for all external service providers.

Every external service is accessed through the abstract base classes in this
package.  Concrete adapters implement these interfaces and are injected at
startup by ``src/main.py``, so unit tests can swap in fakes.

CONCRETE PROVIDER MAP:
    Interface           →  Concrete implementations (in src/providers/)
    ─────────────────────────────────────────────────────────────────────
    IStreamProvider     →  HelixStreamsProvider
    ICacheProvider      →  RedisCacheProvider, MemoryCacheProvider,
                           NullCacheProvider
"""

from src.interfaces.cache_provider import ICacheProvider
from src.interfaces.stream_provider import IStreamProvider

__all__ = [
    "ICacheProvider",
    "IStreamProvider",
]
