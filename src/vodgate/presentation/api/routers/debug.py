"""Diagnostics endpoint."""

import platform

from fastapi import APIRouter

from vodgate.presentation.api.dependencies import SettingsDep
from vodgate.presentation.api.schemas.debug import DebugResponse

router = APIRouter()


@router.get("/debug", summary="Show runtime diagnostics")
async def debug(settings: SettingsDep) -> DebugResponse:
    return DebugResponse(
        env=platform.python_implementation().lower(),
        runtime=platform.python_version(),
        tmdb=settings.tmdb_enabled,
        sites_json=bool(settings.sites_json),
        remote_db_url=bool(settings.remote_db_url),
        search_timeout_seconds=settings.search_timeout_seconds,
    )
