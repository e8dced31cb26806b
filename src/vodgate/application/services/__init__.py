"""Application layer services."""

from vodgate.application.services.access_service import (
    AccessService,
    AccessStatus,
    VerificationResult,
    hash_password,
)
from vodgate.application.services.fanout_search_service import (
    DEFAULT_SOURCE_TIMEOUT,
    FanOutSearchService,
)
from vodgate.application.services.metadata_proxy_service import MetadataProxyService
from vodgate.application.services.playlist_proxy_service import (
    PlaylistProxyService,
    ProxyPayload,
    relay_stream,
)

__all__ = [
    "DEFAULT_SOURCE_TIMEOUT",
    "AccessService",
    "AccessStatus",
    "FanOutSearchService",
    "MetadataProxyService",
    "PlaylistProxyService",
    "ProxyPayload",
    "VerificationResult",
    "hash_password",
    "relay_stream",
]
