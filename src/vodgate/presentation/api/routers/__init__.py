"""API routers."""

from vodgate.presentation.api.routers.auth import router as auth_router
from vodgate.presentation.api.routers.config import router as config_router
from vodgate.presentation.api.routers.debug import router as debug_router
from vodgate.presentation.api.routers.detail import router as detail_router
from vodgate.presentation.api.routers.metadata import router as metadata_router
from vodgate.presentation.api.routers.proxy import router as proxy_router
from vodgate.presentation.api.routers.search import router as search_router
from vodgate.presentation.api.routers.sites import router as sites_router

__all__ = [
    "auth_router",
    "config_router",
    "debug_router",
    "detail_router",
    "metadata_router",
    "proxy_router",
    "search_router",
    "sites_router",
]
