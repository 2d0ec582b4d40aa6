"""Custom exception hierarchy."""

from __future__ import annotations

from pathlib import Path


class ScraperError(Exception):
    """Base exception for all library errors."""

    pass


class ConfigurationError(ScraperError):
    """Invalid static configuration (base URL, retry settings, ...)."""

    pass


class CredentialError(ScraperError):
    """Credentials needed to call the API are missing or unusable."""

    pass


class NoGuestTokenError(CredentialError):
    """No guest token could be obtained or found in the header set."""

    def __init__(self, message: str = "no guest token") -> None:
        super().__init__(message)


class InvalidGuestTokenError(CredentialError):
    """Guest token is present but malformed."""

    def __init__(self, message: str = "invalid guest token") -> None:
        super().__init__(message)


class NetworkError(ScraperError):
    """Connection-level failure (DNS, reset, TLS, transport timeout).

    Never retried by the HTTP client.
    """

    pass


class BadStatusError(ScraperError):
    """API returned a status code that is not retried."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        super().__init__(message or f"api returned status code: {status_code}")
        self.status_code = status_code


class RetriesExhaustedError(BadStatusError):
    """A retryable status persisted past the configured retry cap."""

    def __init__(self, status_code: int, attempts: int) -> None:
        super().__init__(
            status_code,
            f"api returned status code: {status_code} (gave up after {attempts} attempts)",
        )
        self.attempts = attempts


class ParseError(ScraperError):
    """Response body is malformed or has an unexpected shape."""

    pass


class ValidationError(ScraperError):
    """Record failed validation (e.g. identifier is not an unsigned integer)."""

    pass


class PersistenceError(ScraperError):
    """Header file could not be loaded or saved."""

    def __init__(self, message: str, path: str | Path) -> None:
        super().__init__(message)
        self.path = Path(path)


class HeaderLoadError(PersistenceError):
    """Loading persisted headers failed (I/O or format)."""

    def __init__(self, reason: str, path: str | Path) -> None:
        super().__init__(f"could not load persisted headers from file {str(path)!r}: {reason}", path)
        self.reason = reason


class HeaderSaveError(PersistenceError):
    """Saving headers failed."""

    def __init__(self, reason: str, path: str | Path) -> None:
        super().__init__(f"could not save headers to file {str(path)!r}: {reason}", path)
        self.reason = reason
