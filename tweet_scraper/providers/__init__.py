"""API providers."""

from .twitter import ScraperConfig, SearchQueryEncoder, SearchTimelineAdapter, search_spec

__all__ = [
    "ScraperConfig",
    "SearchQueryEncoder",
    "SearchTimelineAdapter",
    "search_spec",
]
