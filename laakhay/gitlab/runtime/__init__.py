"""Runtime orchestration components."""

from .pagination import Page, Paginated, PageFetcher, PaginationWalker
from .rest import RESTTransport, RestRunner

__all__ = [
    "RESTTransport",
    "RestRunner",
    "Page",
    "PageFetcher",
    "PaginationWalker",
    "Paginated",
]
