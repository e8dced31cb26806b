"""Application ports."""

from vodgate.application.ports.upstream import (
    UpstreamPort,
    UpstreamStream,
    UpstreamText,
)

__all__ = [
    "UpstreamPort",
    "UpstreamStream",
    "UpstreamText",
]
