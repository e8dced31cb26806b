"""FastAPI dependency injection for the gateway API.

Provides dependencies for:
- Settings
- The shared upstream HTTP client
- Query and service instances built per request
"""

import logging
from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from vodgate.application.queries import ResolveSourcesQuery, SourceDetailQuery
from vodgate.application.services import (
    AccessService,
    FanOutSearchService,
    MetadataProxyService,
    PlaylistProxyService,
)
from vodgate.infrastructure.http import UpstreamClient
from vodgate.presentation.api.config import get_api_settings
from vodgate_config.settings import Settings

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Upstream HTTP client (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_upstream_client() -> UpstreamClient:
    """
    Get the shared upstream HTTP client (singleton).

    The client owns the connection pool and is reused across requests.
    It is closed by the application lifespan.
    """
    settings = get_api_settings()
    return UpstreamClient(timeout=settings.upstream_timeout_seconds)


SettingsDep = Annotated[Settings, Depends(get_api_settings)]
UpstreamDep = Annotated[UpstreamClient, Depends(get_upstream_client)]


# -----------------------------------------------------------------------------
# Queries & Services
# -----------------------------------------------------------------------------


def get_resolve_sources_query(
    settings: SettingsDep,
    upstream: UpstreamDep,
) -> ResolveSourcesQuery:
    return ResolveSourcesQuery(settings=settings, upstream=upstream)


ResolveSourcesDep = Annotated[ResolveSourcesQuery, Depends(get_resolve_sources_query)]


def get_source_detail_query(
    resolve_sources: ResolveSourcesDep,
    upstream: UpstreamDep,
) -> SourceDetailQuery:
    return SourceDetailQuery(resolve_sources=resolve_sources, upstream=upstream)


def get_search_service(
    settings: SettingsDep,
    upstream: UpstreamDep,
) -> FanOutSearchService:
    return FanOutSearchService(
        upstream=upstream,
        source_timeout=settings.search_timeout_seconds,
    )


def get_proxy_service(
    settings: SettingsDep,
    upstream: UpstreamDep,
) -> PlaylistProxyService:
    return PlaylistProxyService(upstream=upstream, user_agent=settings.proxy_user_agent)


def get_metadata_service(
    settings: SettingsDep,
    upstream: UpstreamDep,
) -> MetadataProxyService:
    return MetadataProxyService.from_settings(settings, upstream)


def get_access_service(settings: SettingsDep) -> AccessService:
    return AccessService.from_settings(settings)


SourceDetailDep = Annotated[SourceDetailQuery, Depends(get_source_detail_query)]
SearchServiceDep = Annotated[FanOutSearchService, Depends(get_search_service)]
ProxyServiceDep = Annotated[PlaylistProxyService, Depends(get_proxy_service)]
MetadataServiceDep = Annotated[MetadataProxyService, Depends(get_metadata_service)]
AccessServiceDep = Annotated[AccessService, Depends(get_access_service)]


async def close_upstream_client() -> None:
    """Close the shared upstream client if it was ever created."""
    if get_upstream_client.cache_info().currsize:
        await get_upstream_client().close()
        get_upstream_client.cache_clear()
        logger.info("Upstream HTTP client closed")
