"""Twitch Helix ``GET /streams`` provider.

Issues one authenticated GET per page through an injected
``httpx.AsyncClient``.  The app access token and client ID come from
:class:`~src.config.settings.Settings` and are sent as-is; this provider
never refreshes them.

Failure policy:

- Non-200 status, empty body, or transport error (timeout, DNS, refused
  connection) -> :class:`~src.utils.errors.UpstreamError`, no retry.
- 200 with a body that is not a JSON object carrying ``data`` -> an empty
  page with no cursor, which ends pagination for the caller.
"""

from __future__ import annotations

import json
from typing import Any

import httpx

from src.config.settings import Settings
from src.interfaces.stream_provider import IStreamProvider
from src.models.stream import StreamPage, StreamRecord
from src.utils.errors import UpstreamError
from src.utils.logging import get_logger

_PROVIDER_NAME = "twitch_helix"


class HelixStreamsProvider(IStreamProvider):
    """Stream listings from the Twitch Helix API.

    Parameters
    ----------
    http_client:
        Injected ``httpx.AsyncClient`` for testability and connection pooling.
    settings:
        Supplies base URL, credentials and the per-call timeout.
    """

    def __init__(self, http_client: httpx.AsyncClient, settings: Settings) -> None:
        self._http = http_client
        self._base_url = settings.twitch_api_base_url.rstrip("/")
        self._client_id = settings.twitch_client_id
        self._access_token = settings.twitch_app_access_token
        self._timeout = settings.twitch_timeout_seconds
        self._logger = get_logger(__name__)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._access_token}",
            "Client-Id": self._client_id,
        }

    @staticmethod
    def _build_params(game_id: str, page_size: int, cursor: str | None) -> dict[str, Any]:
        params: dict[str, Any] = {"game_id": game_id, "first": page_size}
        if cursor:
            params["after"] = cursor
        return params

    @staticmethod
    def _parse_page(body: str) -> StreamPage:
        """Turn a 200 body into a page; anything malformed becomes a last page."""
        try:
            payload = json.loads(body)
        except ValueError:
            return StreamPage()
        if not isinstance(payload, dict) or not isinstance(payload.get("data"), list):
            return StreamPage()

        records = [
            StreamRecord.from_helix(item)
            for item in payload["data"]
            if isinstance(item, dict)
        ]
        pagination = payload.get("pagination")
        cursor = pagination.get("cursor") if isinstance(pagination, dict) else None
        return StreamPage(records=records, cursor=str(cursor) if cursor else None)

    # ------------------------------------------------------------------
    # IStreamProvider implementation
    # ------------------------------------------------------------------

    async def fetch_page(
        self,
        game_id: str,
        page_size: int,
        cursor: str | None = None,
    ) -> StreamPage:
        """Fetch one page of live streams for *game_id*."""
        url = f"{self._base_url}/streams"
        params = self._build_params(game_id, page_size, cursor)

        try:
            response = await self._http.get(
                url,
                params=params,
                headers=self._headers(),
                timeout=self._timeout,
            )
        except httpx.HTTPError as exc:
            self._logger.error(
                "upstream_request_failed",
                game_id=game_id,
                error=str(exc) or type(exc).__name__,
            )
            raise UpstreamError(
                provider_name=_PROVIDER_NAME,
                http_code=0,
                detail=str(exc) or type(exc).__name__,
            ) from exc

        body = response.text
        if response.status_code != 200 or not body:
            self._logger.error(
                "upstream_bad_response",
                game_id=game_id,
                status=response.status_code,
            )
            raise UpstreamError(
                provider_name=_PROVIDER_NAME,
                http_code=response.status_code,
                detail=body,
            )

        page = self._parse_page(body)
        self._logger.debug(
            "upstream_page_fetched",
            game_id=game_id,
            records=len(page.records),
            has_cursor=page.cursor is not None,
        )
        return page

    def get_provider_name(self) -> str:
        """Return ``'twitch_helix'``."""
        return _PROVIDER_NAME

    def is_available(self) -> bool:
        """Return ``True`` if both the client ID and access token are configured."""
        return bool(self._client_id and self._access_token)
