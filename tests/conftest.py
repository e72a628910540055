"""Shared pytest fixtures for the stream carousel test suite."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.config.settings import Settings
from src.interfaces.stream_provider import IStreamProvider
from src.models.stream import StreamPage, StreamRecord

# ---------------------------------------------------------------------------
# Helix payload builders
# ---------------------------------------------------------------------------


def helix_item(
    login: str,
    title: str = "",
    tags: Any = None,
    name: str | None = None,
    thumbnail_url: str | None = None,
) -> dict[str, Any]:
    """Build one element of a Helix ``GET /streams`` ``data`` array."""
    return {
        "id": f"stream-{login}",
        "user_id": f"user-{login}",
        "user_login": login,
        "user_name": name if name is not None else login.capitalize(),
        "game_id": "494131",
        "type": "live",
        "title": title,
        "viewer_count": 42,
        "language": "es",
        "thumbnail_url": thumbnail_url
        or f"https://static-cdn.jtvnw.net/previews-ttv/live_user_{login}-{{width}}x{{height}}.jpg",
        "tags": [] if tags is None else tags,
        "is_mature": False,
    }


def helix_body(items: list[dict[str, Any]], cursor: str | None = None) -> str:
    """Serialize a Helix response body with optional pagination cursor."""
    pagination: dict[str, Any] = {"cursor": cursor} if cursor else {}
    return json.dumps({"data": items, "pagination": pagination}, ensure_ascii=False)


def helix_page(items: list[dict[str, Any]], cursor: str | None = None) -> StreamPage:
    """Build the parsed page a provider would return for *items*."""
    return StreamPage(
        records=[StreamRecord.from_helix(item) for item in items],
        cursor=cursor,
    )


def fake_http_response(status_code: int = 200, text: str = "") -> MagicMock:
    """Mimic the parts of ``httpx.Response`` the Helix provider reads."""
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    return response


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def test_settings() -> Settings:
    """Settings with credentials filled in and caching off."""
    return Settings(
        twitch_client_id="test-client-id",
        twitch_app_access_token="test-token",
        twitch_api_base_url="https://api.twitch.test/helix",
        twitch_default_first=50,
        twitch_max_pages=50,
        cache_backend="none",
        cache_ttl_seconds=300,
        redis_prefix="twitch_carousel:",
        app_env="test",
    )


@pytest.fixture
def mock_stream_provider() -> IStreamProvider:
    """Mock IStreamProvider; script pages via ``fetch_page.side_effect``."""
    mock = MagicMock(spec=IStreamProvider)
    mock.get_provider_name.return_value = "mock-helix"
    mock.is_available.return_value = True
    mock.fetch_page = AsyncMock(return_value=StreamPage())
    return mock
