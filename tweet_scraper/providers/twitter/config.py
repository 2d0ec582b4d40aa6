"""Scraper configuration.

Groups the tunables of one scraper instance: where to send requests, how to
retry, how long to wait for the network and the browser.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ...core.exceptions import ConfigurationError
from ...core.retry import RetryPolicy
from .constants import EXPLORE_URL, SEARCH_URL, STATIC_SEARCH_PARAMS


@dataclass(frozen=True)
class ScraperConfig:
    """Settings shared by the HTTP client, encoder and stream engine.

    Attributes:
        base_url: Search endpoint URL
        static_params: Fixed query parameters sent with every page request
        retry: Retry policy for transient HTTP statuses
        timeout: Total timeout in seconds for one HTTP attempt
        max_empty_pages: Consecutive empty pages that end a stream (None = never)
        explore_url: Page loaded by the browser to obtain a guest token
        bootstrap_timeout: Seconds to wait for the guest token cookie
        headless: Run the bootstrap browser without a window
    """

    base_url: str = SEARCH_URL
    static_params: tuple[tuple[str, str], ...] = STATIC_SEARCH_PARAMS
    retry: RetryPolicy = field(default_factory=RetryPolicy)
    timeout: float = 30.0
    max_empty_pages: int | None = None
    explore_url: str = EXPLORE_URL
    bootstrap_timeout: float = 30.0
    headless: bool = True

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ConfigurationError("timeout must be positive")
        if self.bootstrap_timeout <= 0:
            raise ConfigurationError("bootstrap_timeout must be positive")
        if self.max_empty_pages is not None and self.max_empty_pages < 1:
            raise ConfigurationError("max_empty_pages must be at least 1")
