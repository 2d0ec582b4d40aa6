"""Structured logging for page fetches and stream lifecycle.

This module provides telemetry hooks for the search stream and HTTP client,
emitting short event names with structured ``extra`` fields.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    query: str,
    page_index: int,
    records: int,
    has_cursor: bool,
    latency_ms: float | None = None,
) -> None:
    """Log a successfully fetched and decoded page.

    Args:
        query: Search query text
        page_index: Zero-based index of the page within the stream
        records: Number of merged records decoded from the page
        has_cursor: Whether the request carried a continuation cursor
        latency_ms: Fetch and decode latency in milliseconds (optional)
    """
    logger.info(
        "page_fetched",
        extra={
            "query": query,
            "page_index": page_index,
            "records": records,
            "has_cursor": has_cursor,
            "latency_ms": latency_ms,
        },
    )


def log_retry_scheduled(*, url: str, status_code: int, attempt: int, delay_s: float) -> None:
    """Log a retryable HTTP status and the sleep before the next attempt.

    Args:
        url: Requested URL
        status_code: Retryable status returned by the API
        attempt: One-based number of the attempt that failed
        delay_s: Seconds until the request is sent again
    """
    logger.warning(
        "retry_scheduled",
        extra={
            "url": url,
            "status_code": status_code,
            "attempt": attempt,
            "delay_s": delay_s,
        },
    )


def log_page_error(*, query: str, page_index: int, error_type: str, error_message: str) -> None:
    """Log a fatal page error.

    Args:
        query: Search query text
        page_index: Zero-based index of the page that failed
        error_type: Exception class name (e.g., "NetworkError", "ParseError")
        error_message: Error message
    """
    logger.error(
        "page_error",
        extra={
            "query": query,
            "page_index": page_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_stream_terminated(*, query: str, reason: str, yielded: int, pages_fetched: int) -> None:
    """Log the end of a search stream."""
    logger.info(
        "stream_terminated",
        extra={
            "query": query,
            "reason": reason,
            "yielded": yielded,
            "pages_fetched": pages_fetched,
        },
    )
