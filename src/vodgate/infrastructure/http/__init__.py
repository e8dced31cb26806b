"""Outbound HTTP adapters."""

from vodgate.infrastructure.http.upstream_client import (
    HttpxUpstreamStream,
    UpstreamClient,
)

__all__ = [
    "HttpxUpstreamStream",
    "UpstreamClient",
]
