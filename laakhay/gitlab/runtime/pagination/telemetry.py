"""Structured logging for pagination walks.

Only successful progress is logged here; failures propagate to the caller
untouched and logging them is the caller's concern.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    endpoint_id: str,
    token: str | None,
    items: int,
    next_token: str | None,
    latency_ms: float | None = None,
) -> None:
    """Log a single fetched page.

    Args:
        endpoint_id: Endpoint identifier
        token: Token the page was requested with (None for the first page)
        items: Number of items on the page
        next_token: Token of the following page, if any
        latency_ms: Round-trip latency in milliseconds (optional)
    """
    logger.debug(
        "page_fetched",
        extra={
            "endpoint_id": endpoint_id,
            "token": token,
            "items": items,
            "next_token": next_token,
            "latency_ms": latency_ms,
        },
    )


def log_walk_complete(
    *,
    endpoint_id: str,
    pages_fetched: int,
    total_items: int,
    total_latency_ms: float | None = None,
) -> None:
    """Log completion of a pagination walk."""
    logger.info(
        "walk_complete",
        extra={
            "endpoint_id": endpoint_id,
            "pages_fetched": pages_fetched,
            "total_items": total_items,
            "total_latency_ms": total_latency_ms,
        },
    )


def log_pagination_cycle(*, endpoint_id: str, token: str, pages_fetched: int) -> None:
    """Log a repeated page token that ended a walk early."""
    logger.warning(
        "pagination_cycle_detected",
        extra={
            "endpoint_id": endpoint_id,
            "token": token,
            "pages_fetched": pages_fetched,
        },
    )
