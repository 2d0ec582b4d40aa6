"""HTTP client with fixed-interval retry on transient statuses."""

from __future__ import annotations

import asyncio
from typing import Any

import aiohttp

from ...core.exceptions import (
    BadStatusError,
    NetworkError,
    ParseError,
    RetriesExhaustedError,
)
from ...core.retry import RetryPolicy
from ..telemetry import log_retry_scheduled


class HTTPClient:
    """Async HTTP client wrapper.

    ``get`` performs one logical GET: statuses accepted by the retry policy
    are retried after a fixed sleep, other non-2xx statuses and transport
    failures are raised immediately.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        retry: RetryPolicy | None = None,
    ) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.retry = retry or RetryPolicy()
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET request returning the decoded JSON body.

        Raises:
            BadStatusError: Non-retryable status
            RetriesExhaustedError: Retry cap reached (only with ``max_retries``)
            NetworkError: Connection-level failure
            ParseError: 2xx body is not valid JSON
        """
        retries = 0
        while True:
            try:
                async with self.session.get(url, params=params, headers=headers) as response:
                    status = response.status
                    if 200 <= status < 300:
                        try:
                            return await response.json(content_type=None)
                        except ValueError as e:
                            raise ParseError(f"invalid JSON body: {e}") from e
                    if not self.retry.should_retry(status):
                        raise BadStatusError(status)
            except aiohttp.ClientError as e:
                raise NetworkError(f"network error: {e}") from e
            except asyncio.TimeoutError as e:
                raise NetworkError("network error: request timed out") from e

            if not self.retry.allows(retries):
                raise RetriesExhaustedError(status, attempts=retries + 1)
            retries += 1
            log_retry_scheduled(
                url=url, status_code=status, attempt=retries, delay_s=self.retry.interval
            )
            await asyncio.sleep(self.retry.interval)

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
