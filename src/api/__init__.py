"""Stream carousel API layer -- routes, schemas, and middleware."""

from src.api.middleware import (
    ErrorHandlingMiddleware,
    RequestLoggingMiddleware,
    configure_cors,
)
from src.api.routes import router
from src.api.schemas import (
    CarouselConfigResponse,
    ErrorResponse,
    HealthResponse,
    StreamListResponse,
)

__all__ = [
    "ErrorHandlingMiddleware",
    "RequestLoggingMiddleware",
    "configure_cors",
    "router",
    "CarouselConfigResponse",
    "ErrorResponse",
    "HealthResponse",
    "StreamListResponse",
]
