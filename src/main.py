"""Stream carousel FastAPI application entry point.

Wires together the stream provider, cache provider and services via
dependency injection.  Loads configuration from ``.env`` and
``config/config.yaml`` and configures structured logging.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

import httpx
import structlog
import uvicorn
from fastapi import FastAPI

from src.api.middleware import (
    ErrorHandlingMiddleware,
    RequestLoggingMiddleware,
    configure_cors,
)
from src.api.routes import APP_VERSION
from src.api.routes import router as api_router
from src.config.loader import load_config
from src.config.settings import Settings
from src.interfaces.cache_provider import ICacheProvider
from src.providers.cache.memory_cache import MemoryCacheProvider
from src.providers.cache.null_cache import NullCacheProvider
from src.providers.cache.redis_cache import RedisCacheProvider
from src.providers.streams.helix_provider import HelixStreamsProvider
from src.services.carousel_config import CarouselConfigService
from src.services.stream_collector import StreamCollector
from src.services.stream_service import StreamService
from src.utils.errors import ConfigurationError
from src.utils.logging import configure_logging_from_settings, get_logger

# ---------------------------------------------------------------------------
# Module-level settings & logging
# ---------------------------------------------------------------------------

settings = Settings()

configure_logging_from_settings(settings)
_logger: structlog.BoundLogger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Cache backend selection
# ---------------------------------------------------------------------------


def _build_cache_provider(app_settings: Settings) -> ICacheProvider:
    """Select the cache backend named by ``CACHE_BACKEND``."""
    backend = app_settings.cache_backend
    if backend == "redis":
        return RedisCacheProvider.from_settings(app_settings)
    if backend == "memory":
        return MemoryCacheProvider(ttl=app_settings.cache_ttl_seconds)
    if backend == "none":
        return NullCacheProvider()
    raise ConfigurationError(f"Unknown cache backend: {backend!r}")


# ---------------------------------------------------------------------------
# Full DI assembly for the FastAPI application
# ---------------------------------------------------------------------------


def _build_all(app_settings: Settings, http_client: httpx.AsyncClient | None = None) -> dict[str, Any]:
    """Construct every provider and service instance for the application.

    Returns a flat dict of named components to be stored on ``app.state``.
    """
    http_client = http_client or httpx.AsyncClient(timeout=app_settings.twitch_timeout_seconds)
    config = load_config(settings=app_settings)

    stream_provider = HelixStreamsProvider(http_client=http_client, settings=app_settings)
    if not stream_provider.is_available():
        _logger.warning(
            "upstream_credentials_missing",
            msg="TWITCH_CLIENT_ID / TWITCH_APP_ACCESS_TOKEN not set; upstream calls will be rejected.",
        )

    cache_provider = _build_cache_provider(app_settings)
    collector = StreamCollector(stream_provider, max_pages=app_settings.twitch_max_pages)
    stream_service = StreamService(
        collector=collector,
        cache_ttl=app_settings.cache_ttl_seconds,
        key_prefix=app_settings.redis_prefix,
        max_page_size=app_settings.twitch_default_first,
    )

    return {
        "http_client": http_client,
        "stream_provider": stream_provider,
        "cache_provider": cache_provider,
        "stream_service": stream_service,
        "carousel_config": CarouselConfigService.from_config(config),
    }


# ---------------------------------------------------------------------------
# FastAPI application factory
# ---------------------------------------------------------------------------


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build and configure the FastAPI application."""
    app_settings = app_settings or settings

    @asynccontextmanager
    async def _lifespan(application: FastAPI):  # noqa: ANN202
        """Initialise providers and services on startup, clean up on shutdown."""
        components = _build_all(app_settings)
        for key, value in components.items():
            setattr(application.state, key, value)

        _logger.info(
            "app_startup",
            version=APP_VERSION,
            environment=app_settings.app_env,
            cache_backend=components["cache_provider"].get_provider_name(),
            upstream=components["stream_provider"].get_provider_name(),
        )

        yield

        http_client: httpx.AsyncClient = components["http_client"]
        await http_client.aclose()
        _logger.info("app_shutdown", message="HTTP client closed")

    application = FastAPI(
        title="Stream Carousel API",
        version=APP_VERSION,
        description=(
            "Live streams for one category, filtered by title keywords and tags, "
            "cached briefly and shaped for the carousel widget."
        ),
        lifespan=_lifespan,
    )

    # -- Middleware (last added = first executed) --
    application.add_middleware(ErrorHandlingMiddleware)
    application.add_middleware(RequestLoggingMiddleware)
    if app_settings.enable_cors_all_origins:
        configure_cors(application)

    application.include_router(api_router)
    return application


app = create_app()

# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    uvicorn.run(
        "src.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=(settings.app_env == "development"),
    )
