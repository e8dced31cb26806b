"""Playlist rewriting CORS proxy endpoint."""

from fastapi import APIRouter, Query, Request, Response
from fastapi.responses import StreamingResponse

from vodgate.presentation.api.dependencies import ProxyServiceDep

router = APIRouter()


@router.get(
    "/cors",
    name="cors_proxy",
    summary="Fetch a URL on behalf of the browser",
    responses={
        200: {"description": "Rewritten playlist or relayed upstream bytes"},
        400: {"description": "Missing url"},
    },
)
async def cors_proxy(
    request: Request,
    service: ProxyServiceDep,
    url: str | None = Query(None, description="Absolute upstream URL"),
):
    """
    Fetch `url` and return it with permissive CORS headers.

    HLS playlists have every segment, variant and key reference rewritten
    to an absolute URL routed back through this endpoint. Any other body
    is streamed through unchanged.
    """
    proxy_base = f"{request.url_for('cors_proxy')}?url="
    payload = await service.proxy(url, proxy_base)
    if payload.rewritten:
        return Response(content=payload.body, media_type=payload.content_type)
    return StreamingResponse(payload.body_stream, media_type=payload.content_type or None)
