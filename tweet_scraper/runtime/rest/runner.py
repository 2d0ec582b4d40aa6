"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ...core.exceptions import ConfigurationError
from ...models import PageRequest
from .http_client import HTTPClient


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: str  # only "GET" is supported by the search API
    build_request: Callable[[dict[str, Any]], PageRequest]
    build_headers: Callable[[dict[str, Any]], dict[str, str]] | None = None

    def __post_init__(self) -> None:
        if self.method.upper() != "GET":
            raise ConfigurationError(f"unsupported method for endpoint {self.id}: {self.method}")


class ResponseAdapter:
    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return response


class RestRunner:
    def __init__(self, transport: HTTPClient) -> None:
        self._t = transport

    async def run(
        self, *, spec: RestEndpointSpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> Any:
        request = spec.build_request(params)
        headers = spec.build_headers(params) if spec.build_headers else None

        data = await self._t.get(request.url, headers=headers)
        return adapter.parse(data, params)
