"""Generic pagination layer for listing endpoints.

Architecture:
    The pagination layer consists of:
    - definitions.py: Page structure and per-endpoint pagination styles
    - fetcher.py: PageFetcher (one request -> one Page)
    - walker.py: PaginationWalker and the lazy Paginated view
    - telemetry.py: Structured logging

Usage:
    Endpoints opt into pagination by setting ``pagination`` on their
    RestEndpointSpec; RestRunner.paginate wires fetcher and walker together.
"""

from __future__ import annotations

from .definitions import (
    BodyPagination,
    HeaderPagination,
    LinkHeaderPagination,
    Page,
    PageInfo,
    PaginationStyle,
    merge_query,
    parse_link_header,
)
from .fetcher import PageFetcher
from .walker import Paginated, PaginationWalker

__all__ = [
    "Page",
    "PageInfo",
    "PaginationStyle",
    "HeaderPagination",
    "LinkHeaderPagination",
    "BodyPagination",
    "PageFetcher",
    "PaginationWalker",
    "Paginated",
    "merge_query",
    "parse_link_header",
]
