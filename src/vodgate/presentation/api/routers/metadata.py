"""TMDB metadata and image pass-through endpoints."""

import logging

from fastapi import APIRouter, Request, Response
from fastapi.responses import StreamingResponse

from vodgate.application.services import relay_stream
from vodgate.presentation.api.dependencies import MetadataServiceDep

logger = logging.getLogger(__name__)

router = APIRouter()

METADATA_CACHE_CONTROL = "public, max-age=3600"
IMAGE_CACHE_CONTROL = "public, max-age=86400"
JSON_MEDIA_TYPE = "application/json; charset=utf-8"


@router.get(
    "/tmdb-proxy",
    summary="Proxy a TMDB API call",
    responses={
        200: {"description": "TMDB response body, passed through"},
        400: {"description": "Missing path or TMDB API key"},
    },
)
async def tmdb_proxy(request: Request, service: MetadataServiceDep) -> Response:
    """
    Forward a TMDB v3 request with the server-side API key.

    `path` selects the TMDB endpoint; every other query parameter is
    forwarded unchanged.
    """
    params = request.query_params
    upstream = await service.fetch(params.get("path"), params.multi_items())
    return Response(
        content=upstream.text,
        media_type=JSON_MEDIA_TYPE,
        headers={"Cache-Control": METADATA_CACHE_CONTROL},
    )


@router.get(
    "/tmdb-image/{size}/{file_name}",
    summary="Proxy a TMDB image",
    responses={200: {"description": "Image bytes streamed from the TMDB CDN"}},
)
async def tmdb_image(size: str, file_name: str, service: MetadataServiceDep) -> StreamingResponse:
    stream = await service.open_image(size, file_name)
    return StreamingResponse(
        relay_stream(stream),
        status_code=stream.status_code,
        media_type=stream.content_type or None,
        headers={"Cache-Control": IMAGE_CACHE_CONTROL},
    )
