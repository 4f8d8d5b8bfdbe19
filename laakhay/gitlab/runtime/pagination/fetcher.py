"""Single-page fetching.

The PageFetcher issues exactly one GET per call and turns the response into
a typed Page. It never retries; transport and service failures propagate
unchanged.
"""

from __future__ import annotations

from time import perf_counter
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ...query.encoder import EncodedQuery
from .definitions import Page, PaginationStyle
from .telemetry import log_page_fetched

if TYPE_CHECKING:
    from ..rest.runner import ResponseAdapter
    from ..rest.transport import RESTTransport

T = TypeVar("T")


class PageFetcher(Generic[T]):
    """Fetches one page of a paginated endpoint."""

    def __init__(
        self,
        transport: RESTTransport,
        style: PaginationStyle,
        adapter: ResponseAdapter,
        *,
        per_page: int,
        params: dict[str, Any] | None = None,
        endpoint_id: str = "unknown",
    ) -> None:
        """Initialize page fetcher.

        Args:
            transport: Transport used for the GET request
            style: Where this endpoint keeps its pagination metadata
            adapter: Parses the raw item list into domain objects
            per_page: Requested page size
            params: Endpoint params handed to the adapter
            endpoint_id: Identifier used in logs
        """
        if per_page < 1:
            raise ValueError("per_page must be positive")
        self._transport = transport
        self._style = style
        self._adapter = adapter
        self._per_page = per_page
        self._params = params or {}
        self.endpoint_id = endpoint_id

    @property
    def first_token(self) -> str | None:
        """Token the first page is requested with (see PaginationStyle.first_token)."""
        return self._style.first_token()

    async def fetch(self, path: str, query: EncodedQuery, token: str | None = None) -> Page[T]:
        """Fetch the page identified by ``token`` (None for the first page)."""
        target, request_query = self._style.build_request(path, query, token, self._per_page)

        start = perf_counter()
        response = await self._transport.send("GET", target, params=list(request_query) or None)
        latency_ms = (perf_counter() - start) * 1000.0

        info = self._style.extract(response)
        items = self._adapter.parse(info.items, self._params)

        log_page_fetched(
            endpoint_id=self.endpoint_id,
            token=token,
            items=len(items),
            next_token=info.next_token,
            latency_ms=latency_ms,
        )
        return Page(
            items=items,
            next_token=info.next_token,
            total=info.total,
            total_pages=info.total_pages,
        )
