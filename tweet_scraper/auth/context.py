"""Authentication context forwarded with every API request."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, field_validator

from ..core.exceptions import CredentialError, InvalidGuestTokenError, NoGuestTokenError
from ..providers.twitter.constants import AUTHORIZATION_HEADER, BEARER_TOKEN, GUEST_TOKEN_HEADER


class AuthContext(BaseModel):
    """Header set needed to call the search API.

    Header names are stored lower-case. Use ``from_headers`` or ``for_guest``
    rather than the constructor so that credential checks run.
    """

    headers: dict[str, str]

    model_config = ConfigDict(frozen=True)

    @field_validator("headers")
    @classmethod
    def normalize_names(cls, v: dict[str, str]) -> dict[str, str]:
        return {name.lower(): value for name, value in v.items()}

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> AuthContext:
        """Build a context from an arbitrary header mapping.

        Raises:
            CredentialError: No authorization header
            NoGuestTokenError: No guest token header
            InvalidGuestTokenError: Guest token is not numeric
        """
        ctx = cls(headers=dict(headers))
        if not ctx.headers.get(AUTHORIZATION_HEADER):
            raise CredentialError("missing authorization header")
        token = ctx.headers.get(GUEST_TOKEN_HEADER)
        if not token:
            raise NoGuestTokenError()
        if not token.isascii() or not token.isdigit():
            raise InvalidGuestTokenError(f"invalid guest token: {token!r}")
        return ctx

    @classmethod
    def for_guest(cls, guest_token: str, bearer_token: str = BEARER_TOKEN) -> AuthContext:
        """Combine a guest token with the bearer token."""
        return cls.from_headers(
            {
                AUTHORIZATION_HEADER: f"Bearer {bearer_token}",
                GUEST_TOKEN_HEADER: guest_token,
            }
        )

    @property
    def guest_token(self) -> str | None:
        return self.headers.get(GUEST_TOKEN_HEADER)
