"""Runtime layer: HTTP transport, request runner and telemetry."""

from .rest import HTTPClient, ResponseAdapter, RestEndpointSpec, RestRunner

__all__ = [
    "HTTPClient",
    "ResponseAdapter",
    "RestEndpointSpec",
    "RestRunner",
]
