"""Core exceptions and policies shared across the library."""

from .exceptions import (
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
    ScraperError,
    ValidationError,
)
from .retry import DEFAULT_RETRY_INTERVAL, DEFAULT_RETRY_STATUSES, RetryPolicy

__all__ = [
    "BadStatusError",
    "ConfigurationError",
    "CredentialError",
    "DEFAULT_RETRY_INTERVAL",
    "DEFAULT_RETRY_STATUSES",
    "HeaderLoadError",
    "HeaderSaveError",
    "InvalidGuestTokenError",
    "NetworkError",
    "NoGuestTokenError",
    "ParseError",
    "PersistenceError",
    "RetriesExhaustedError",
    "RetryPolicy",
    "ScraperError",
    "ValidationError",
]
