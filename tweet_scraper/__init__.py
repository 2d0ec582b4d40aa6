"""Tweet Scraper - paginated Twitter search as an async stream of tweets."""

__version__ = "0.3.0"

from .auth import AuthContext, bootstrap_auth, load_headers, save_headers
from .clients import SearchStream, Termination, TerminationReason, TweetScraper
from .core import (
    BadStatusError,
    ConfigurationError,
    CredentialError,
    HeaderLoadError,
    HeaderSaveError,
    InvalidGuestTokenError,
    NetworkError,
    NoGuestTokenError,
    ParseError,
    PersistenceError,
    RetriesExhaustedError,
    RetryPolicy,
    ScraperError,
    ValidationError,
)
from .models import PageRequest, SearchPage, SearchRequest, Tweet
from .providers.twitter import ScraperConfig, SearchQueryEncoder, SearchTimelineAdapter
from .runtime.rest import HTTPClient, RestRunner

__all__ = [
    "AuthContext",
    "BadStatusError",
    "ConfigurationError",
    "CredentialError",
    "HTTPClient",
    "HeaderLoadError",
    "HeaderSaveError",
    "InvalidGuestTokenError",
    "NetworkError",
    "NoGuestTokenError",
    "PageRequest",
    "ParseError",
    "PersistenceError",
    "RestRunner",
    "RetriesExhaustedError",
    "RetryPolicy",
    "ScraperConfig",
    "ScraperError",
    "SearchPage",
    "SearchQueryEncoder",
    "SearchRequest",
    "SearchStream",
    "SearchTimelineAdapter",
    "Termination",
    "TerminationReason",
    "Tweet",
    "TweetScraper",
    "ValidationError",
    "bootstrap_auth",
    "load_headers",
    "save_headers",
]
