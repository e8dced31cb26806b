"""Source catalogue endpoint."""

from fastapi import APIRouter

from vodgate.presentation.api.dependencies import ResolveSourcesDep
from vodgate.presentation.api.schemas.sites import SitesResponse

router = APIRouter()


@router.get(
    "/sites",
    summary="List configured sources",
    responses={200: {"description": "Resolved source catalogue, including inactive sources"}},
)
async def list_sites(resolve_sources: ResolveSourcesDep) -> SitesResponse:
    registry = await resolve_sources.execute()
    return SitesResponse.from_registry(registry)
