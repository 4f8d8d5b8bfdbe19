"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ...query.encoder import EncodedQuery
from ..pagination import Paginated, PageFetcher, PaginationStyle, PaginationWalker
from .transport import RESTTransport


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: str  # "GET" | "POST" | "PUT" | "DELETE"
    build_path: Callable[[dict[str, Any]], str]
    build_query: Callable[[dict[str, Any]], EncodedQuery] | None = None
    build_body: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    build_headers: Callable[[dict[str, Any]], dict[str, str]] | None = None
    # None for single-resource endpoints
    pagination: PaginationStyle | None = None


class ResponseAdapter:
    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return response


class RestRunner:
    def __init__(self, transport: RESTTransport, *, per_page: int = 100) -> None:
        self._t = transport
        self._per_page = per_page

    async def run(
        self, *, spec: RestEndpointSpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> Any:
        """Execute a single request/response endpoint."""
        path = spec.build_path(params)
        query = spec.build_query(params) if spec.build_query else None
        body = spec.build_body(params) if spec.build_body else None
        headers = spec.build_headers(params) if spec.build_headers else None

        response = await self._t.send(
            spec.method,
            path,
            params=list(query) if query else None,
            json_body=body,
            headers=headers,
        )
        return adapter.parse(response.data, params)

    def paginate(
        self,
        *,
        spec: RestEndpointSpec,
        adapter: ResponseAdapter,
        params: dict[str, Any],
        per_page: int | None = None,
        strict: bool = False,
    ) -> Paginated[Any]:
        """Build a lazy listing over every page of a paginated endpoint.

        Path and query are built here, eagerly, so encoding errors surface
        before any request is made.
        """
        if spec.pagination is None:
            raise ValueError(f"Endpoint {spec.id!r} is not paginated")
        if spec.method.upper() != "GET":
            raise ValueError(f"Paginated endpoint {spec.id!r} must use GET")

        path = spec.build_path(params)
        query: EncodedQuery = spec.build_query(params) if spec.build_query else ()
        fetcher: PageFetcher[Any] = PageFetcher(
            self._t,
            spec.pagination,
            adapter,
            per_page=per_page or self._per_page,
            params=params,
            endpoint_id=spec.id,
        )
        return PaginationWalker(fetcher, strict=strict).walk(path, query)
