"""Unit tests for PaginationWalker and Paginated."""

from __future__ import annotations

import asyncio
import logging
from contextlib import aclosing
from unittest.mock import AsyncMock, MagicMock

import pytest

from laakhay.gitlab.core import MalformedPageError, ServiceError, TransportError
from laakhay.gitlab.runtime.pagination import (
    HeaderPagination,
    PageFetcher,
    PaginationWalker,
)
from laakhay.gitlab.runtime.rest import ResponseAdapter, RESTResponse, RESTTransport


def _page(items: list[str], next_page: str = "") -> RESTResponse:
    return RESTResponse(200, {"X-Next-Page": next_page}, items)


def _walker(*responses, strict: bool = False) -> tuple[PaginationWalker, MagicMock]:
    transport = MagicMock(spec=RESTTransport)
    transport.send = AsyncMock(side_effect=list(responses))
    fetcher = PageFetcher(
        transport, HeaderPagination(), ResponseAdapter(), per_page=2, endpoint_id="test"
    )
    return PaginationWalker(fetcher, strict=strict), transport


def _requested_pages(transport: MagicMock) -> list[str]:
    return [dict(call.kwargs["params"])["page"] for call in transport.send.call_args_list]


class TestPaginationWalker:
    """Walk order, termination and failure behaviour."""

    @pytest.mark.asyncio
    async def test_order_preserved_across_pages(self):
        """Pages [A,B],[C,D],[E] aggregate to [A,B,C,D,E]."""
        walker, transport = _walker(
            _page(["A", "B"], "2"),
            _page(["C", "D"], "3"),
            _page(["E"]),
        )

        result = await walker.collect("/issues", ())

        assert result == ["A", "B", "C", "D", "E"]
        assert _requested_pages(transport) == ["1", "2", "3"]

    @pytest.mark.asyncio
    async def test_single_page_without_next(self):
        """No next indicator -> that page's items and exactly one request."""
        walker, transport = _walker(_page(["A", "B"]))

        assert await walker.collect("/issues", ()) == ["A", "B"]
        assert transport.send.call_count == 1

    @pytest.mark.asyncio
    async def test_empty_listing(self):
        walker, transport = _walker(_page([]))

        assert await walker.collect("/issues", ()) == []
        assert transport.send.call_count == 1

    @pytest.mark.asyncio
    async def test_repeated_token_stops_walk(self, caplog):
        """Same next token twice in a row ends the walk with no third request."""
        walker, transport = _walker(
            _page(["A", "B"], "2"),
            _page(["C", "D"], "2"),
            _page(["never"], ""),
        )

        with caplog.at_level(logging.WARNING):
            result = await walker.collect("/issues", ())

        assert result == ["A", "B", "C", "D"]
        assert transport.send.call_count == 2
        assert any(r.getMessage() == "pagination_cycle_detected" for r in caplog.records)

    @pytest.mark.asyncio
    async def test_next_token_pointing_back_at_first_page(self):
        """Page 1 answering X-Next-Page: 1 is a cycle; page 1 is not fetched twice."""
        walker, transport = _walker(_page(["A", "B"], "1"), _page(["A", "B"], "1"))

        assert await walker.collect("/issues", ()) == ["A", "B"]
        assert transport.send.call_count == 1

    @pytest.mark.asyncio
    async def test_next_token_pointing_back_at_first_page_strict(self):
        walker, transport = _walker(_page(["A"], "1"), strict=True)

        with pytest.raises(MalformedPageError) as exc_info:
            await walker.collect("/issues", ())

        assert exc_info.value.token == "1"
        assert transport.send.call_count == 1

    @pytest.mark.asyncio
    async def test_revisited_token_stops_walk(self):
        """A token seen earlier in the walk (longer cycle) also ends it."""
        walker, transport = _walker(
            _page(["A"], "2"),
            _page(["B"], "3"),
            _page(["C"], "2"),
            _page(["never"]),
        )

        assert await walker.collect("/issues", ()) == ["A", "B", "C"]
        assert transport.send.call_count == 3

    @pytest.mark.asyncio
    async def test_repeated_token_strict(self):
        """Strict walkers report the cycle as a malformed page."""
        walker, transport = _walker(_page(["A"], "2"), _page(["B"], "2"), strict=True)

        with pytest.raises(MalformedPageError) as exc_info:
            await walker.collect("/issues", ())

        assert exc_info.value.token == "2"
        assert transport.send.call_count == 2

    @pytest.mark.asyncio
    async def test_service_error_aborts_without_partial_results(self):
        """Page 2 failing yields the error, not pages fetched so far."""
        error = ServiceError("GitLab API error 500", status_code=500)
        walker, transport = _walker(_page(["A", "B"], "2"), error, _page(["E"]))

        with pytest.raises(ServiceError) as exc_info:
            await walker.collect("/issues", ())

        assert exc_info.value is error
        assert transport.send.call_count == 2

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self):
        error = TransportError("connection reset")
        walker, transport = _walker(_page(["A"], "2"), error)

        with pytest.raises(TransportError):
            await walker.collect("/issues", ())
        assert transport.send.call_count == 2

    @pytest.mark.asyncio
    async def test_malformed_metadata_aborts(self):
        walker, _ = _walker(RESTResponse(200, {"X-Next-Page": "next!"}, ["A"]))

        with pytest.raises(MalformedPageError):
            await walker.collect("/issues", ())

    @pytest.mark.asyncio
    async def test_pages_are_fetched_sequentially(self):
        """Page N+1 is only requested after page N has been received."""
        in_flight = 0
        max_in_flight = 0
        responses = iter([_page(["A"], "2"), _page(["B"], "3"), _page(["C"])])

        async def send(method, path, params=None):
            nonlocal in_flight, max_in_flight
            in_flight += 1
            max_in_flight = max(max_in_flight, in_flight)
            await asyncio.sleep(0)
            in_flight -= 1
            return next(responses)

        transport = MagicMock(spec=RESTTransport)
        transport.send = AsyncMock(side_effect=send)
        walker = PaginationWalker(
            PageFetcher(transport, HeaderPagination(), ResponseAdapter(), per_page=1)
        )

        assert await walker.collect("/x", ()) == ["A", "B", "C"]
        assert max_in_flight == 1

    @pytest.mark.asyncio
    async def test_cancellation_stops_walk(self):
        """Cancelling mid-walk propagates and issues no further requests."""
        blocked = asyncio.Event()

        async def send(method, path, params=None):
            if transport.send.call_count == 1:
                return _page(["A"], "2")
            blocked.set()
            await asyncio.Event().wait()

        transport = MagicMock(spec=RESTTransport)
        transport.send = AsyncMock(side_effect=send)
        walker = PaginationWalker(
            PageFetcher(transport, HeaderPagination(), ResponseAdapter(), per_page=1)
        )

        task = asyncio.create_task(walker.collect("/x", ()))
        await blocked.wait()
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
        assert transport.send.call_count == 2

    @pytest.mark.asyncio
    async def test_walk_complete_logged(self, caplog):
        walker, _ = _walker(_page(["A"], "2"), _page(["B"]))

        with caplog.at_level(logging.INFO):
            await walker.collect("/issues", ())

        records = [r for r in caplog.records if r.getMessage() == "walk_complete"]
        assert len(records) == 1
        assert records[0].pages_fetched == 2
        assert records[0].total_items == 2


class TestPaginated:
    """Lazy view over a walk."""

    @pytest.mark.asyncio
    async def test_lazy_iteration(self):
        walker, transport = _walker(_page(["A", "B"], "2"), _page(["C"]))
        paginated = walker.walk("/issues", ())

        assert transport.send.call_count == 0
        items = [item async for item in paginated]
        assert items == ["A", "B", "C"]
        assert transport.send.call_count == 2

    @pytest.mark.asyncio
    async def test_restartable_from_scratch(self):
        """Each iteration starts a fresh walk from the first page."""
        walker, transport = _walker(_page(["A"], "2"), _page(["B"]), _page(["A"], "2"), _page(["B"]))
        paginated = walker.walk("/issues", ())

        assert await paginated.collect() == ["A", "B"]
        assert await paginated.collect() == ["A", "B"]
        assert _requested_pages(transport) == ["1", "2", "1", "2"]

    @pytest.mark.asyncio
    async def test_first_stops_fetching(self):
        """first() does not fetch pages beyond the match."""
        walker, transport = _walker(_page(["A", "B"], "2"), _page(["C"]))

        assert await walker.walk("/issues", ()).first(lambda item: item == "B") == "B"
        assert transport.send.call_count == 1

    @pytest.mark.asyncio
    async def test_first_without_match(self):
        walker, transport = _walker(_page(["A"], "2"), _page(["C"]))

        assert await walker.walk("/issues", ()).first(lambda item: item == "Z") is None
        assert transport.send.call_count == 2

    @pytest.mark.asyncio
    async def test_first_without_predicate(self):
        walker, _ = _walker(_page(["A", "B"], "2"))
        assert await walker.walk("/issues", ()).first() == "A"

    @pytest.mark.asyncio
    async def test_pages(self):
        walker, _ = _walker(
            RESTResponse(200, {"X-Next-Page": "2", "X-Total": "3"}, ["A", "B"]),
            RESTResponse(200, {"X-Next-Page": "", "X-Total": "3"}, ["C"]),
        )

        pages = [page async for page in walker.walk("/issues", ()).pages()]

        assert [page.items for page in pages] == [["A", "B"], ["C"]]
        assert [page.next_token for page in pages] == ["2", None]
        assert pages[0].total == 3

    @pytest.mark.asyncio
    async def test_pages_closes_walk_on_early_exit(self):
        """Leaving pages() early finalizes the underlying walk."""
        walker, transport = _walker(_page(["A"], "2"), _page(["B"], "3"), _page(["C"]))
        paginated = walker.walk("/issues", ())
        finalized = False
        iter_pages = walker.iter_pages

        async def tracked(path, query):
            nonlocal finalized
            try:
                async for page in iter_pages(path, query):
                    yield page
            finally:
                finalized = True

        walker.iter_pages = tracked

        async with aclosing(paginated.pages()) as pages:
            async for page in pages:
                assert page.items == ["A"]
                break

        assert finalized
        assert transport.send.call_count == 1
