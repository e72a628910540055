"""FastAPI routes for the stream carousel API.

Service dependencies are resolved from ``app.state`` via FastAPI's
``Depends`` using the ``Annotated`` pattern.

# ─── API ROUTE MAP ────────────────────────────────────────────────────
#
# Endpoint                  Method  Description
# ─────────────────────────────────────────────────────────────────────
# /api/streams              GET     Filtered live streams (cached)
# /api/streams.php          GET     Same, at the path the widget expects
# /api/carousel/config      GET     Widget filters + color palette
# /api/health               GET     Health check + backend status
#
# The query is validated in its own dependency, which the cache
# dependency builds on, so a 400 never touches the cache.  The cache
# dependency is a ``yield`` dependency: the backend connection
# is acquired before the handler runs and released after the response,
# on success and on error alike.
# ──────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, Response

from src.api.schemas import (
    CarouselConfigResponse,
    ErrorResponse,
    HealthResponse,
    StreamListResponse,
)
from src.interfaces.cache_provider import ICacheProvider
from src.models.stream import FilterQuery
from src.services.carousel_config import CarouselConfigService
from src.services.stream_service import StreamService
from src.utils.serialization import JSON_MEDIA_TYPE


APP_VERSION = "0.1.0"

router = APIRouter(prefix="/api")


# ---------------------------------------------------------------------------
# Dependency injection helpers -- resolve singletons from app.state
# ---------------------------------------------------------------------------


def _get_stream_service(request: Request) -> StreamService:
    return request.app.state.stream_service


StreamServiceDep = Annotated[StreamService, Depends(_get_stream_service)]


def _get_query(
    service: StreamServiceDep,
    game_id: Annotated[str | None, Query(description="Upstream category ID (required).")] = None,
    keywords: Annotated[
        str | None, Query(description="Title keywords, separated by commas, semicolons or spaces.")
    ] = None,
    tags: Annotated[str | None, Query(description="Tag names, same separators.")] = None,
    limit: Annotated[str | None, Query(description="Maximum number of streams (default 20).")] = None,
) -> FilterQuery:
    """Normalize the query string; a missing ``game_id`` fails here."""
    return service.build_query(game_id, keywords, tags, limit)


QueryDep = Annotated[FilterQuery, Depends(_get_query)]


async def _get_cache(request: Request, query: QueryDep) -> AsyncIterator[ICacheProvider]:
    # Depends on the validated query so a bad request never opens a connection.
    provider: ICacheProvider = request.app.state.cache_provider
    async with provider.acquire() as cache:
        yield cache


def _get_carousel_config(request: Request) -> CarouselConfigService:
    return request.app.state.carousel_config


CacheDep = Annotated[ICacheProvider, Depends(_get_cache)]
CarouselConfigDep = Annotated[CarouselConfigService, Depends(_get_carousel_config)]


# ---------------------------------------------------------------------------
# Streams
# ---------------------------------------------------------------------------


@router.get(
    "/streams",
    response_model=StreamListResponse,
    responses={400: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
async def list_streams(
    service: StreamServiceDep,
    query: QueryDep,
    cache: CacheDep,
) -> Response:
    """Return live streams in ``game_id`` filtered by title keywords and tags.

    The body is written as raw JSON bytes so that a cache hit replays the
    stored payload byte for byte.
    """
    result = await service.get_streams(query, cache)
    return Response(
        content=result.body,
        media_type=JSON_MEDIA_TYPE,
        headers={"X-Cache": "HIT" if result.cache_hit else "MISS"},
    )


router.add_api_route(
    "/streams.php",
    list_streams,
    methods=["GET"],
    include_in_schema=False,
)


# ---------------------------------------------------------------------------
# Carousel widget
# ---------------------------------------------------------------------------


@router.get("/carousel/config", response_model=CarouselConfigResponse)
async def carousel_config(request: Request, config: CarouselConfigDep) -> CarouselConfigResponse:
    """Resolve the widget's filters and palette from the page's query string."""
    resolved = config.resolve(dict(request.query_params))
    return CarouselConfigResponse(**resolved)


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------


@router.get("/health", response_model=HealthResponse)
async def health(request: Request) -> HealthResponse:
    """Report the configured cache backend and whether upstream credentials are set."""
    cache_provider: ICacheProvider = request.app.state.cache_provider
    stream_provider = request.app.state.stream_provider
    return HealthResponse(
        status="healthy",
        version=APP_VERSION,
        cache_backend=cache_provider.get_provider_name(),
        upstream_configured=stream_provider.is_available(),
    )
