"""Application settings loaded from environment variables via pydantic-settings.

# ─── HOW SETTINGS WORK ────────────────────────────────────────────────
#
# pydantic-settings reads configuration from TWO sources (in priority
# order):
#
#   1. **Environment variables** -- e.g., TWITCH_CLIENT_ID=abc123
#   2. **.env file** -- key=value lines in the project root .env file
#
# Field `twitch_client_id` maps to env var `TWITCH_CLIENT_ID`.
# Defaults below apply when neither source sets a value.
#
# The .env file is in .gitignore -- use .env.example as the template.
# ──────────────────────────────────────────────────────────────────────
"""

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Helix rejects ``first`` values above 100.
HELIX_MAX_PAGE_SIZE = 100


class Settings(BaseSettings):
    """Stream carousel application settings.

    Environment variables override defaults. Loaded from .env file when present.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # === Twitch Helix ===
    # The app access token is issued out of band; this service never refreshes it.
    twitch_client_id: str = ""
    twitch_app_access_token: str = ""
    twitch_api_base_url: str = "https://api.twitch.tv/helix"
    twitch_default_first: int = 50
    twitch_timeout_seconds: float = 15.0
    twitch_max_pages: int = 50

    # === Cache ===
    # "none" disables caching, "memory" keeps a per-process TTL cache,
    # "redis" talks to the Redis server configured below.
    cache_backend: Literal["none", "memory", "redis"] = "none"
    cache_ttl_seconds: int = 300
    redis_host: str = "127.0.0.1"
    redis_port: int = 6379
    redis_password: str = ""
    redis_db: int | None = 0
    redis_prefix: str = "twitch_carousel:"
    redis_connect_timeout: float = 1.5

    # === Carousel page defaults ===
    twitch_carousel_default_game_id: str = "1469308723"  # Software and Game Development
    twitch_carousel_default_title_keywords: str = ""
    twitch_carousel_default_tag_keywords: str = ""

    # === App Config ===
    enable_cors_all_origins: bool = True
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    app_env: str = "development"
    log_level: str = "INFO"
    log_enabled: bool = True

    @field_validator("twitch_default_first")
    @classmethod
    def _clamp_page_size(cls, value: int) -> int:
        return max(1, min(value, HELIX_MAX_PAGE_SIZE))

    @field_validator("twitch_max_pages")
    @classmethod
    def _at_least_one_page(cls, value: int) -> int:
        return max(1, value)

    def effective_log_level(self) -> str:
        """Log level after applying the ``LOG_ENABLED`` switch."""
        if not self.log_enabled:
            return "WARNING"
        return self.log_level
