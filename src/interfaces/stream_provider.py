"""Abstract base class for live-stream listing providers.

A stream provider returns one page of live streams for a category.  The
adapter pattern keeps the Helix HTTP details out of the collection loop and
lets tests drive the loop with scripted pages.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from src.models.stream import StreamPage


class IStreamProvider(ABC):
    """Contract for paginated live-stream listing services."""

    @abstractmethod
    async def fetch_page(
        self,
        game_id: str,
        page_size: int,
        cursor: str | None = None,
    ) -> StreamPage:
        """Fetch one page of live streams for *game_id*.

        Parameters
        ----------
        game_id:
            Upstream category identifier.
        page_size:
            Number of streams to request (1..100).
        cursor:
            Continuation token from the previous page, or ``None`` for the
            first page.

        Returns
        -------
        StreamPage
            The page's records in upstream order and the next cursor
            (``None`` on the last page).  A malformed page is returned as an
            empty last page.

        Raises
        ------
        src.utils.errors.UpstreamError
            On a non-success HTTP status, an empty body, or a transport
            failure.  Never retried.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a short identifier for this provider."""

    @abstractmethod
    def is_available(self) -> bool:
        """Return ``True`` if the provider has the credentials it needs."""
