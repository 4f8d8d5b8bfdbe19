"""Pagination metadata definitions and per-endpoint pagination styles.

This module defines the page structure returned by the fetcher and the
strategies that know where a given endpoint puts its pagination metadata:

- HeaderPagination: offset pagination via ``X-Next-Page``/``X-Total`` headers
- LinkHeaderPagination: keyset pagination via the ``Link: <...>; rel="next"`` header
- BodyPagination: items and cursor carried in the JSON body

The style is chosen per endpoint in its RestEndpointSpec; there is no global
default.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ...core.exceptions import MalformedPageError
from ...query.encoder import EncodedQuery

if TYPE_CHECKING:
    from ..rest.http_client import RESTResponse

T = TypeVar("T")

_LINK_PART = re.compile(r'<(?P<url>[^>]*)>\s*;\s*(?P<params>.*)')
_REL = re.compile(r'rel\s*=\s*"?(?P<rel>[^";]+)"?')


@dataclass(frozen=True)
class Page(Generic[T]):
    """One response's worth of items plus pagination metadata.

    Attributes:
        items: Parsed items in service order
        next_token: Token for the next page (None on the last page)
        total: Total item count, when the service reports it
        total_pages: Total page count, when the service reports it
    """

    items: list[T] = field(default_factory=list)
    next_token: str | None = None
    total: int | None = None
    total_pages: int | None = None


@dataclass(frozen=True)
class PageInfo:
    """Raw items and metadata extracted from a response, before parsing."""

    items: list[Any]
    next_token: str | None = None
    total: int | None = None
    total_pages: int | None = None


class PaginationStyle:
    """Where an endpoint reads page tokens and writes page-control params."""

    def first_token(self) -> str | None:
        """Token the first request is implicitly made with, if the style has one."""
        return None

    def build_request(
        self, path: str, query: EncodedQuery, token: str | None, per_page: int
    ) -> tuple[str, EncodedQuery]:
        """Return the request target and full query for one page."""
        raise NotImplementedError

    def extract(self, response: RESTResponse) -> PageInfo:
        """Extract raw items and pagination metadata from a response.

        Raises:
            MalformedPageError: If metadata is present but unparsable
        """
        raise NotImplementedError


@dataclass(frozen=True)
class HeaderPagination(PaginationStyle):
    """GitLab offset pagination.

    The body is a JSON list; ``X-Next-Page`` is empty on the last page.
    ``X-Total`` and ``X-Total-Pages`` are omitted by GitLab for very large
    collections, so both are optional.
    """

    page_param: str = "page"
    per_page_param: str = "per_page"
    next_page_header: str = "X-Next-Page"
    total_header: str = "X-Total"
    total_pages_header: str = "X-Total-Pages"
    first_page: str = "1"

    def first_token(self) -> str | None:
        return self.first_page

    def build_request(
        self, path: str, query: EncodedQuery, token: str | None, per_page: int
    ) -> tuple[str, EncodedQuery]:
        control = ((self.page_param, token or self.first_page), (self.per_page_param, str(per_page)))
        return path, merge_query(query, control)

    def extract(self, response: RESTResponse) -> PageInfo:
        items = _require_list(response.data)
        next_page = _int_header(response, self.next_page_header)
        return PageInfo(
            items=items,
            next_token=str(next_page) if next_page is not None else None,
            total=_int_header(response, self.total_header),
            total_pages=_int_header(response, self.total_pages_header),
        )


@dataclass(frozen=True)
class LinkHeaderPagination(PaginationStyle):
    """GitLab keyset pagination.

    The next token is the absolute ``rel="next"`` URL, which already carries
    every query parameter, so follow-up requests go to it verbatim.
    """

    per_page_param: str = "per_page"
    first_page_params: EncodedQuery = (("pagination", "keyset"),)

    def build_request(
        self, path: str, query: EncodedQuery, token: str | None, per_page: int
    ) -> tuple[str, EncodedQuery]:
        if token:
            return token, ()
        control = (*self.first_page_params, (self.per_page_param, str(per_page)))
        return path, merge_query(query, control)

    def extract(self, response: RESTResponse) -> PageInfo:
        items = _require_list(response.data)
        link = response.header("Link")
        next_url = parse_link_header(link).get("next") if link else None
        return PageInfo(items=items, next_token=next_url or None)


@dataclass(frozen=True)
class BodyPagination(PaginationStyle):
    """Items and cursor carried in a JSON object body.

    Attributes:
        items_field: Key of the item list
        next_field: Key of the next-page cursor (null/absent on the last page)
        has_more_field: Optional boolean key; when false the walk ends even
            if a cursor is present
        total_field: Optional key of the total item count
        cursor_param: Query key the cursor is sent back under
    """

    items_field: str = "data"
    next_field: str = "next_cursor"
    has_more_field: str | None = None
    total_field: str | None = None
    cursor_param: str = "cursor"
    per_page_param: str = "per_page"

    def build_request(
        self, path: str, query: EncodedQuery, token: str | None, per_page: int
    ) -> tuple[str, EncodedQuery]:
        control: EncodedQuery = ((self.per_page_param, str(per_page)),)
        if token is not None:
            control = ((self.cursor_param, token), *control)
        return path, merge_query(query, control)

    def extract(self, response: RESTResponse) -> PageInfo:
        body = response.data
        if not isinstance(body, dict):
            raise MalformedPageError(
                f"Expected a JSON object page, got {type(body).__name__}"
            )
        items = _require_list(body.get(self.items_field, []))

        cursor = body.get(self.next_field)
        if cursor is not None and (isinstance(cursor, bool) or not isinstance(cursor, str | int)):
            raise MalformedPageError(f"Invalid {self.next_field!r} value: {cursor!r}")
        next_token = str(cursor) if cursor not in (None, "") else None

        if self.has_more_field is not None:
            has_more = body.get(self.has_more_field)
            if has_more is not None and not isinstance(has_more, bool):
                raise MalformedPageError(f"Invalid {self.has_more_field!r} value: {has_more!r}")
            if has_more is False:
                next_token = None

        total = None
        if self.total_field is not None and body.get(self.total_field) is not None:
            total = _to_int(body[self.total_field], self.total_field)
        return PageInfo(items=items, next_token=next_token, total=total)


def merge_query(query: EncodedQuery, control: EncodedQuery) -> EncodedQuery:
    """Append pagination-control pairs, dropping caller pairs with the same key."""
    control_keys = {key for key, _ in control}
    return tuple(pair for pair in query if pair[0] not in control_keys) + tuple(control)


def parse_link_header(value: str) -> dict[str, str]:
    """Parse an RFC 8288 ``Link`` header into a ``{rel: url}`` mapping.

    Examples:
        >>> parse_link_header('<https://x/api?page=2>; rel="next", <https://x/api?page=9>; rel="last"')
        {'next': 'https://x/api?page=2', 'last': 'https://x/api?page=9'}
    """
    links: dict[str, str] = {}
    for part in value.split(","):
        match = _LINK_PART.match(part.strip())
        if not match:
            continue
        rel = _REL.search(match.group("params"))
        if rel:
            for name in rel.group("rel").split():
                links.setdefault(name, match.group("url"))
    return links


def _require_list(data: Any) -> list[Any]:
    if data is None:
        return []
    if not isinstance(data, list):
        raise MalformedPageError(f"Expected a JSON list of items, got {type(data).__name__}")
    return data


def _int_header(response: RESTResponse, name: str) -> int | None:
    raw = response.header(name)
    if raw is None or not raw.strip():
        return None
    return _to_int(raw.strip(), name)


def _to_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise MalformedPageError(f"Invalid {name} value: {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise MalformedPageError(f"Invalid {name} value: {value!r}") from None
