"""Unit tests for the StreamCollector page loop."""

from __future__ import annotations

import pytest

from src.interfaces.stream_provider import IStreamProvider
from src.models.stream import FilterQuery
from src.services.stream_collector import StreamCollector
from src.utils.errors import UpstreamError
from src.utils.text_normalizer import parse_terms
from tests.conftest import helix_item, helix_page


def _query(limit: int = 20, keywords: str = "", tags: str = "", page_size: int = 20) -> FilterQuery:
    return FilterQuery(
        game_id="494131",
        keyword_terms=parse_terms(keywords),
        tag_terms=parse_terms(tags),
        limit=limit,
        page_size=min(limit, page_size),
    )


class TestCollect:
    @pytest.mark.asyncio
    async def test_single_page_no_filters(self, mock_stream_provider: IStreamProvider) -> None:
        mock_stream_provider.fetch_page.side_effect = [
            helix_page([helix_item("a"), helix_item("b")]),
        ]
        items = await StreamCollector(mock_stream_provider).collect(_query())

        assert [i.user_login for i in items] == ["a", "b"]
        mock_stream_provider.fetch_page.assert_awaited_once_with("494131", 20, None)

    @pytest.mark.asyncio
    async def test_follows_cursor(self, mock_stream_provider: IStreamProvider) -> None:
        mock_stream_provider.fetch_page.side_effect = [
            helix_page([helix_item("a")], cursor="c1"),
            helix_page([helix_item("b")], cursor="c2"),
            helix_page([helix_item("c")]),
        ]
        items = await StreamCollector(mock_stream_provider).collect(_query())

        assert [i.user_login for i in items] == ["a", "b", "c"]
        cursors = [call.args[2] for call in mock_stream_provider.fetch_page.await_args_list]
        assert cursors == [None, "c1", "c2"]

    @pytest.mark.asyncio
    async def test_filters_applied(self, mock_stream_provider: IStreamProvider) -> None:
        mock_stream_provider.fetch_page.side_effect = [
            helix_page(
                [
                    helix_item("keep", title="Hablamos de Godot", tags=["Español"]),
                    helix_item("wrong_tag", title="Hablamos", tags=["English"]),
                    helix_item("wrong_title", title="Chill", tags=["Español"]),
                ]
            ),
        ]
        items = await StreamCollector(mock_stream_provider).collect(
            _query(keywords="hablamos", tags="español")
        )
        assert [i.user_login for i in items] == ["keep"]

    @pytest.mark.asyncio
    async def test_dedup_keeps_first_occurrence(
        self, mock_stream_provider: IStreamProvider
    ) -> None:
        mock_stream_provider.fetch_page.side_effect = [
            helix_page([helix_item("a", title="first"), helix_item("b")], cursor="c1"),
            helix_page([helix_item("a", title="second"), helix_item("c")]),
        ]
        items = await StreamCollector(mock_stream_provider).collect(_query())

        assert [i.user_login for i in items] == ["a", "b", "c"]
        assert items[0].title == "first"

    @pytest.mark.asyncio
    async def test_stops_mid_page_at_limit(self, mock_stream_provider: IStreamProvider) -> None:
        mock_stream_provider.fetch_page.side_effect = [
            helix_page([helix_item(f"s{n}") for n in range(5)], cursor="more"),
        ]
        items = await StreamCollector(mock_stream_provider).collect(_query(limit=3))

        assert [i.user_login for i in items] == ["s0", "s1", "s2"]
        assert mock_stream_provider.fetch_page.await_count == 1

    @pytest.mark.asyncio
    async def test_page_size_passed_through(self, mock_stream_provider: IStreamProvider) -> None:
        mock_stream_provider.fetch_page.side_effect = [helix_page([])]
        await StreamCollector(mock_stream_provider).collect(_query(limit=3))
        assert mock_stream_provider.fetch_page.await_args.args[1] == 3

    @pytest.mark.asyncio
    async def test_records_without_login_skipped(
        self, mock_stream_provider: IStreamProvider
    ) -> None:
        mock_stream_provider.fetch_page.side_effect = [
            helix_page([helix_item(""), helix_item("named")]),
        ]
        items = await StreamCollector(mock_stream_provider).collect(_query())
        assert [i.user_login for i in items] == ["named"]

    @pytest.mark.asyncio
    async def test_empty_page_with_cursor_continues(
        self, mock_stream_provider: IStreamProvider
    ) -> None:
        mock_stream_provider.fetch_page.side_effect = [
            helix_page([], cursor="c1"),
            helix_page([helix_item("late")]),
        ]
        items = await StreamCollector(mock_stream_provider).collect(_query())
        assert [i.user_login for i in items] == ["late"]

    @pytest.mark.asyncio
    async def test_page_cap_stops_loop(self, mock_stream_provider: IStreamProvider) -> None:
        mock_stream_provider.fetch_page.return_value = helix_page(
            [helix_item("never_matches")], cursor="forever"
        )
        items = await StreamCollector(mock_stream_provider, max_pages=3).collect(
            _query(keywords="nothing-like-this")
        )
        assert items == []
        assert mock_stream_provider.fetch_page.await_count == 3

    @pytest.mark.asyncio
    async def test_upstream_error_propagates(self, mock_stream_provider: IStreamProvider) -> None:
        mock_stream_provider.fetch_page.side_effect = [
            helix_page([helix_item("a")], cursor="c1"),
            UpstreamError(http_code=500, detail="boom"),
        ]
        with pytest.raises(UpstreamError) as exc_info:
            await StreamCollector(mock_stream_provider).collect(_query())
        assert exc_info.value.http_code == 500
