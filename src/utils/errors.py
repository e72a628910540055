"""Custom exception hierarchy for the stream carousel service.

All application exceptions inherit from :class:`StreamCarouselError`, which
carries an optional ``provider_name`` so error handlers can identify which
external service (e.g. "twitch_helix", "redis") caused the failure, plus the
HTTP status the API layer should answer with.

    StreamCarouselError  (base -- catch-all)
    +-- ClientInputError     (400: bad or missing query parameters)
    +-- UpstreamError        (502: streams API failed; never cached)
    +-- CacheError           (absorbed inside the cache gateway)
    +-- ConfigurationError   (startup / invalid settings)

The API middleware turns any ``StreamCarouselError`` that reaches it into a
JSON error envelope ``{"error": ..., "http_code"?: ..., "detail"?: ...}``.
"""

from __future__ import annotations

from typing import Any


class StreamCarouselError(Exception):
    """Base exception for all stream carousel errors.

    Every subclass carries a human-readable ``message`` and an optional
    ``provider_name``.  ``__str__`` prefixes the provider name in brackets
    for log output, e.g. ``[twitch_helix] Twitch API error``.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def to_envelope(self) -> dict[str, Any]:
        """Render the client-facing error envelope."""
        return {"error": self._message}

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


# ---------------------------------------------------------------------------
# Request errors
# ---------------------------------------------------------------------------


class ClientInputError(StreamCarouselError):
    """Raised when a request is missing or has an invalid required parameter."""

    status_code = 400

    def __init__(
        self,
        message: str = "Invalid request parameters",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


# ---------------------------------------------------------------------------
# External service errors
# ---------------------------------------------------------------------------


class UpstreamError(StreamCarouselError):
    """Raised when the streams API answers non-200, empty, or not at all.

    ``http_code`` is the provider's status (``0`` for transport failures,
    where no response arrived) and ``detail`` is the transport error message
    or the raw response body.
    """

    status_code = 502

    def __init__(
        self,
        message: str = "Twitch API error",
        provider_name: str | None = None,
        http_code: int = 0,
        detail: str = "",
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
        self._http_code = http_code
        self._detail = detail

    @property
    def http_code(self) -> int:
        return self._http_code

    @property
    def detail(self) -> str:
        return self._detail

    def to_envelope(self) -> dict[str, Any]:
        return {"error": self.message, "http_code": self._http_code, "detail": self._detail}


class CacheError(StreamCarouselError):
    """Raised by cache backends on connect/auth/read/write failure.

    Never escapes the cache gateway: :class:`ICacheProvider` callers only ever
    see a miss or a failed store.
    """

    def __init__(
        self,
        message: str = "Cache backend failure",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


# ---------------------------------------------------------------------------
# Configuration errors
# ---------------------------------------------------------------------------


class ConfigurationError(StreamCarouselError):
    """Raised when configuration is invalid or missing at startup."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
