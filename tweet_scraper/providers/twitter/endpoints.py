"""Twitter REST endpoint specs and the search query encoder."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from yarl import URL

from ...core.exceptions import ConfigurationError
from ...models import PageRequest, SearchRequest
from ...runtime.rest import RestEndpointSpec
from .constants import SEARCH_URL, STATIC_SEARCH_PARAMS

if TYPE_CHECKING:
    from ...auth.context import AuthContext


class SearchQueryEncoder:
    """Builds page requests for the adaptive search endpoint.

    The base URL is checked once here; ``encode`` itself cannot fail.
    """

    def __init__(
        self,
        base_url: str = SEARCH_URL,
        static_params: tuple[tuple[str, str], ...] = STATIC_SEARCH_PARAMS,
    ) -> None:
        self.base_url = _validate_base_url(base_url)
        self.static_params = tuple(static_params)

    def encode(self, request: SearchRequest, cursor: str | None = None) -> PageRequest:
        """Request for the page following ``cursor`` (first page when None)."""
        return PageRequest(
            base_url=self.base_url,
            params=self.static_params,
            query=request.query,
            cursor=cursor,
        )


def _validate_base_url(base_url: str) -> str:
    try:
        url = URL(base_url)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"malformed base URL {base_url!r}: {e}") from e
    if not url.is_absolute() or url.scheme not in ("http", "https") or not url.host:
        raise ConfigurationError(f"malformed base URL {base_url!r}")
    if url.query_string:
        raise ConfigurationError(f"base URL must not carry a query string: {base_url!r}")
    return str(url)


def search_spec(encoder: SearchQueryEncoder | None = None) -> RestEndpointSpec:
    """Endpoint spec for one search page.

    Expected params: ``request`` (SearchRequest), ``cursor`` (str | None),
    ``auth`` (AuthContext).
    """
    enc = encoder or SearchQueryEncoder()

    def build_request(params: dict[str, Any]) -> PageRequest:
        return enc.encode(params["request"], params.get("cursor"))

    def build_headers(params: dict[str, Any]) -> dict[str, str]:
        auth: AuthContext = params["auth"]
        return dict(auth.headers)

    return RestEndpointSpec(
        id="search",
        method="GET",
        build_request=build_request,
        build_headers=build_headers,
    )
