"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Layout:
    All gateway endpoints live under the /api prefix.
    The health check endpoint stays outside it at /health.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI

from vodgate import __version__
from vodgate.presentation.api.config import get_api_settings
from vodgate.presentation.api.cors import PermissiveCORSMiddleware
from vodgate.presentation.api.dependencies import close_upstream_client
from vodgate.presentation.api.exception_handlers import setup_exception_handlers
from vodgate.presentation.api.routers import (
    auth_router,
    config_router,
    debug_router,
    detail_router,
    metadata_router,
    proxy_router,
    search_router,
    sites_router,
)
from vodgate.presentation.api.schemas.common import HealthResponse
from vodgate_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    Sets up logging for the vodgate application with:
    - Console output with timestamps and module names
    - Configurable log level for vodgate modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    settings = get_settings()
    log_level_str = settings.log_level.upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("vodgate").setLevel(log_level)
    logging.getLogger("vodgate_config").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = __version__
API_PREFIX = "/api"

# OpenAPI tags metadata for documentation
OPENAPI_TAGS = [
    {
        "name": "Search",
        "description": """Concurrent search across every active source.

Results arrive as Server-Sent Events, one chunk per source that answered,
followed by a single `done` event. Slow or failing sources are skipped.
""",
    },
    {
        "name": "Sources",
        "description": """Source catalogue and per-source detail lookup.

The catalogue comes from `SITES_JSON`, then `REMOTE_DB_URL`, then the
built-in defaults, whichever first yields a usable list.
""",
    },
    {
        "name": "Proxy",
        "description": """CORS proxy for media players.

HLS playlists are rewritten so that every segment, variant and key request
is routed back through the proxy.
""",
    },
    {
        "name": "Metadata",
        "description": "TMDB API and image pass-through using the server-side key.",
    },
    {
        "name": "Authentication",
        "description": "Optional shared access password.",
    },
    {
        "name": "Config",
        "description": "Client configuration and diagnostics.",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting vodgate API v%s...", API_VERSION)
    yield

    # Shutdown - release the shared upstream connection pool
    logger.info("Shutting down vodgate API...")
    await close_upstream_client()


def create_api_router() -> APIRouter:
    """Create the API router with all gateway endpoints."""
    api_router = APIRouter()

    api_router.include_router(config_router, tags=["Config"])
    api_router.include_router(debug_router, tags=["Config"])
    api_router.include_router(sites_router, tags=["Sources"])
    api_router.include_router(detail_router, tags=["Sources"])
    api_router.include_router(search_router, tags=["Search"])
    api_router.include_router(proxy_router, tags=["Proxy"])
    api_router.include_router(metadata_router, tags=["Metadata"])
    api_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])

    return api_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    # Configure logging on first app creation (not on module import)
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description=(
            "An **aggregation gateway** for VOD catalogue APIs with "
            "**streaming fan-out search** and an HLS-aware CORS proxy."
        ),
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )
    app.dependency_overrides[get_api_settings] = lambda: settings

    app.add_middleware(PermissiveCORSMiddleware)

    # Register domain exception handlers for consistent error responses
    setup_exception_handlers(app)

    app.include_router(create_api_router(), prefix=API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint.

        Returns service status and version info.
        """
        return HealthResponse(status="healthy", version=API_VERSION)

    return app


# Application instance for uvicorn
app = create_app()
