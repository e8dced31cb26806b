"""Public client configuration endpoint."""

from fastapi import APIRouter, Request

from vodgate.presentation.api.dependencies import SettingsDep
from vodgate.presentation.api.schemas.config import ConfigResponse

router = APIRouter()


@router.get(
    "/config",
    summary="Get client configuration",
    responses={200: {"description": "Non-secret runtime configuration"}},
)
async def get_config(request: Request, settings: SettingsDep) -> ConfigResponse:
    """
    Return the settings a frontend needs at startup.

    The playlist proxy URL is derived from the request origin so it is
    correct behind any host name. The TMDB key itself is never returned.
    """
    cors_proxy_url = str(request.url_for("cors_proxy"))
    return ConfigResponse.from_settings(settings, cors_proxy_url=cors_proxy_url)
