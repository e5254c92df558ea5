"""Structured logging for pagination.

This module provides telemetry hooks for pagers, emitting structured logs
keyed by endpoint id and page index. Cursors are logged, credentials never.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    endpoint_id: str,
    page_index: int,
    has_next: bool,
    latency_ms: float | None = None,
) -> None:
    """Log completion of a single page fetch.

    Args:
        endpoint_id: Endpoint identifier
        page_index: Zero-based index of the page
        has_next: Whether the page returned a usable next cursor
        latency_ms: Latency in milliseconds (optional)
    """
    logger.debug(
        "page_fetched",
        extra={
            "endpoint_id": endpoint_id,
            "page_index": page_index,
            "has_next": has_next,
            "latency_ms": latency_ms,
        },
    )


def log_pager_exhausted(*, endpoint_id: str, pages_fetched: int, reason: str) -> None:
    """Log the transition to the exhausted state.

    Args:
        endpoint_id: Endpoint identifier
        pages_fetched: Number of pages fetched by the pager
        reason: One of "no_cursor", "empty_cursor", "stalled_cursor",
            "empty_page", "max_pages"
    """
    logger.debug(
        "pager_exhausted",
        extra={
            "endpoint_id": endpoint_id,
            "pages_fetched": pages_fetched,
            "reason": reason,
        },
    )


def log_page_error(
    *,
    endpoint_id: str,
    page_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a page fetch error.

    Args:
        endpoint_id: Endpoint identifier
        page_index: Zero-based index of the page that failed
        error_type: Type of error (e.g., "TransportError", "DecodeError")
        error_message: Error message
    """
    logger.error(
        "page_error",
        extra={
            "endpoint_id": endpoint_id,
            "page_index": page_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
