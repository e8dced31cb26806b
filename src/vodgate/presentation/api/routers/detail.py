"""Single-item detail lookup on a named source."""

from fastapi import APIRouter, Query, Response

from vodgate.presentation.api.dependencies import SourceDetailDep

router = APIRouter()

JSON_MEDIA_TYPE = "application/json; charset=utf-8"


@router.get(
    "/detail",
    summary="Get item detail from one source",
    responses={
        200: {"description": "Upstream detail payload, passed through"},
        400: {"description": "Missing item id"},
        404: {"description": "Unknown source key"},
    },
)
async def get_detail(
    query: SourceDetailDep,
    item_id: str | None = Query(None, alias="id", description="Upstream item id"),
    site_key: str | None = Query(None, description="Key of the source to ask"),
) -> Response:
    upstream = await query.execute(site_key, item_id)
    return Response(content=upstream.text, media_type=JSON_MEDIA_TYPE)
