"""Schemas for the source catalogue endpoint."""

from pydantic import BaseModel, ConfigDict, Field

from vodgate.application.queries import SourceRegistry


class SiteResponse(BaseModel):
    """A single upstream source as exposed to clients."""

    key: str = Field(..., description="Unique source identifier")
    name: str = Field(..., description="Human readable source name")
    api: str = Field(..., description="Base URL of the upstream catalogue API")
    active: bool = Field(False, description="Whether the source joins fan-out search")


class SitesResponse(BaseModel):
    """The resolved source catalogue."""

    sites: list[SiteResponse] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "sites": [
                    {
                        "key": "ffzy",
                        "name": "非凡资源",
                        "api": "https://api.ffzyapi.com/api.php/provide/vod/",
                        "active": True,
                    }
                ]
            },
        },
    )

    @classmethod
    def from_registry(cls, registry: SourceRegistry) -> "SitesResponse":
        return cls(
            sites=[
                SiteResponse(
                    key=source.key,
                    name=source.name,
                    api=source.endpoint,
                    active=source.active,
                )
                for source in registry.sources
            ]
        )
