"""Pagination walking: follow page tokens until the service signals the end.

Pages are fetched strictly one after another, because each token is only
known once the previous page has arrived. A walk either completes or raises;
callers never receive a silently truncated listing.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from contextlib import aclosing
from time import perf_counter
from typing import Generic, TypeVar

from ...core.exceptions import MalformedPageError
from ...query.encoder import EncodedQuery
from .definitions import Page
from .fetcher import PageFetcher
from .telemetry import log_pagination_cycle, log_walk_complete

T = TypeVar("T")


class PaginationWalker(Generic[T]):
    """Drives a PageFetcher across every page of a listing."""

    def __init__(self, fetcher: PageFetcher[T], *, strict: bool = False) -> None:
        """Initialize pagination walker.

        Args:
            fetcher: Page fetcher for the endpoint
            strict: Raise MalformedPageError on a repeated page token instead
                of treating it as end-of-stream
        """
        self._fetcher = fetcher
        self._strict = strict

    async def iter_pages(self, path: str, query: EncodedQuery) -> AsyncIterator[Page[T]]:
        """Yield pages in service order, starting from the first page."""
        endpoint_id = self._fetcher.endpoint_id
        first = self._fetcher.first_token
        visited: set[str] = {first} if first is not None else set()
        token: str | None = None
        pages = 0
        total_items = 0
        start = perf_counter()

        while True:
            page = await self._fetcher.fetch(path, query, token)
            pages += 1
            total_items += len(page.items)
            if token is not None:
                visited.add(token)
            yield page

            next_token = page.next_token
            if next_token is None:
                break
            if next_token in visited:
                if self._strict:
                    raise MalformedPageError(
                        f"{endpoint_id}: page token {next_token!r} repeated after {pages} pages",
                        token=next_token,
                    )
                log_pagination_cycle(endpoint_id=endpoint_id, token=next_token, pages_fetched=pages)
                break
            token = next_token

        log_walk_complete(
            endpoint_id=endpoint_id,
            pages_fetched=pages,
            total_items=total_items,
            total_latency_ms=(perf_counter() - start) * 1000.0,
        )

    async def iter_items(self, path: str, query: EncodedQuery) -> AsyncIterator[T]:
        """Yield items in page order, then in-page order."""
        async with aclosing(self.iter_pages(path, query)) as pages:
            async for page in pages:
                for item in page.items:
                    yield item

    def walk(self, path: str, query: EncodedQuery) -> Paginated[T]:
        """Lazy, restartable view of the whole listing."""
        return Paginated(self, path, query)

    async def collect(self, path: str, query: EncodedQuery) -> list[T]:
        """Fetch every page and return all items."""
        return await self.walk(path, query).collect()


class Paginated(Generic[T]):
    """Async iterable over a paginated listing.

    Every ``async for`` starts a fresh walk from the first page; a walk
    cannot be resumed part way through.

        async for issue in client.issues.iter_project("group/project"):
            ...
    """

    def __init__(self, walker: PaginationWalker[T], path: str, query: EncodedQuery) -> None:
        self._walker = walker
        self.path = path
        self.query = query

    def __aiter__(self) -> AsyncIterator[T]:
        return self._walker.iter_items(self.path, self.query)

    async def pages(self) -> AsyncIterator[Page[T]]:
        """Iterate page by page instead of item by item."""
        async with aclosing(self._walker.iter_pages(self.path, self.query)) as pages:
            async for page in pages:
                yield page

    async def collect(self) -> list[T]:
        """Consume the whole walk; any failure discards what was gathered."""
        return [item async for item in self]

    async def first(self, predicate: Callable[[T], bool] | None = None) -> T | None:
        """Return the first (matching) item, fetching no further pages after it."""
        async with aclosing(self._walker.iter_items(self.path, self.query)) as items:
            async for item in items:
                if predicate is None or predicate(item):
                    return item
        return None
