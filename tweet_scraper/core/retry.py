"""Retry policy for transient HTTP failures."""

from __future__ import annotations

from dataclasses import dataclass, field

from .exceptions import ConfigurationError

DEFAULT_RETRY_INTERVAL = 60.0

# Rate limited and request timeout; the 5xx range is handled separately
DEFAULT_RETRY_STATUSES = frozenset({408, 429})


@dataclass(frozen=True)
class RetryPolicy:
    """Fixed-interval retry policy applied to HTTP status codes.

    Transport failures are never retried; only the statuses accepted by
    ``should_retry`` are.

    Attributes:
        interval: Seconds to sleep before retrying the same request
        max_retries: Retry cap (None = retry forever)
        retry_statuses: Extra status codes retried besides the 5xx range
    """

    interval: float = DEFAULT_RETRY_INTERVAL
    max_retries: int | None = None
    retry_statuses: frozenset[int] = field(default=DEFAULT_RETRY_STATUSES)

    def __post_init__(self) -> None:
        if self.interval < 0:
            raise ConfigurationError("RetryPolicy interval cannot be negative")
        if self.max_retries is not None and self.max_retries < 0:
            raise ConfigurationError("RetryPolicy max_retries cannot be negative")

    def should_retry(self, status: int) -> bool:
        """Return True if a response with ``status`` should be retried."""
        return status in self.retry_statuses or 500 <= status <= 599

    def allows(self, retries_done: int) -> bool:
        """Return True if another retry is allowed after ``retries_done`` retries."""
        return self.max_retries is None or retries_done < self.max_retries
