"""High-level clients."""

from .scraper import TweetScraper
from .search_stream import SearchStream, StreamState, Termination, TerminationReason

__all__ = [
    "SearchStream",
    "StreamState",
    "Termination",
    "TerminationReason",
    "TweetScraper",
]
