"""Page-fetch loop that turns upstream stream pages into carousel items.

The collector walks the provider's pages in order, keeps records that pass
both filters, and deduplicates on ``user_login`` (first seen wins; the
upstream can repeat a stream across pages while its viewer count shifts).
It stops as soon as one of these holds:

- ``query.limit`` items have been collected (mid-page if need be),
- the provider returns a page without a cursor,
- ``max_pages`` pages have been fetched.

An :class:`~src.utils.errors.UpstreamError` on any page propagates
unchanged: the caller gets no partial results.
"""

from __future__ import annotations

import structlog

from src.interfaces.stream_provider import IStreamProvider
from src.models.stream import CarouselStream, FilterQuery
from src.utils.logging import get_logger
from src.utils.matching import accepts

logger: structlog.BoundLogger = get_logger(__name__)

DEFAULT_MAX_PAGES = 50


class StreamCollector:
    """Drives an :class:`IStreamProvider` across pages for one query.

    Parameters
    ----------
    provider:
        Source of stream pages.
    max_pages:
        Hard cap on upstream requests per query.
    """

    def __init__(self, provider: IStreamProvider, max_pages: int = DEFAULT_MAX_PAGES) -> None:
        self._provider = provider
        self._max_pages = max(1, max_pages)

    async def collect(self, query: FilterQuery) -> list[CarouselStream]:
        """Return up to ``query.limit`` matching streams in upstream order."""
        collected: dict[str, CarouselStream] = {}
        cursor: str | None = None
        pages = 0

        while len(collected) < query.limit:
            if pages >= self._max_pages:
                logger.warning(
                    "page_cap_reached",
                    game_id=query.game_id,
                    pages=pages,
                    collected=len(collected),
                )
                break

            page = await self._provider.fetch_page(query.game_id, query.page_size, cursor)
            pages += 1

            for record in page.records:
                if not record.user_login:
                    continue
                if not accepts(record, query.keyword_terms, query.tag_terms):
                    continue
                if record.user_login not in collected:
                    collected[record.user_login] = CarouselStream.from_record(record)
                if len(collected) >= query.limit:
                    break

            if len(collected) >= query.limit or not page.cursor:
                break
            cursor = page.cursor

        logger.debug(
            "streams_collected",
            game_id=query.game_id,
            pages=pages,
            collected=len(collected),
        )
        return list(collected.values())
