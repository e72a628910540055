"""Utility modules for the stream carousel service.

- **errors** -- exception hierarchy rooted at StreamCarouselError; each
  subclass knows the HTTP status and envelope it renders to.
- **logging** -- structlog setup with a dual-renderer pattern: coloured
  console output in development, structured JSON in production.
- **text_normalizer** -- filter-term parsing and ``limit`` coercion.
- **matching** -- keyword and tag predicates applied to each stream.
- **cache_keys** -- deterministic cache keys for normalized queries.
- **serialization** -- compact UTF-8 JSON encoding for responses.
"""

from src.utils.cache_keys import build_cache_key
from src.utils.errors import (
    CacheError,
    ClientInputError,
    ConfigurationError,
    StreamCarouselError,
    UpstreamError,
)
from src.utils.matching import accepts, matches_keywords, matches_tags
from src.utils.serialization import encode_json, serialize_streams
from src.utils.text_normalizer import parse_limit, parse_terms

__all__ = [
    "CacheError",
    "ClientInputError",
    "ConfigurationError",
    "StreamCarouselError",
    "UpstreamError",
    "accepts",
    "build_cache_key",
    "encode_json",
    "matches_keywords",
    "matches_tags",
    "parse_limit",
    "parse_terms",
    "serialize_streams",
]
