"""Twitter adaptive search provider: encoder, decoder and configuration."""

from .adapters import SearchTimelineAdapter, extract_cursor, merge_tweets
from .config import ScraperConfig
from .endpoints import SearchQueryEncoder, search_spec

__all__ = [
    "ScraperConfig",
    "SearchQueryEncoder",
    "SearchTimelineAdapter",
    "extract_cursor",
    "merge_tweets",
    "search_spec",
]
