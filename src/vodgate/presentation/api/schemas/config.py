"""Schemas for the public client configuration endpoint."""

from pydantic import BaseModel, ConfigDict, Field

from vodgate_config.settings import Settings


class ConfigResponse(BaseModel):
    """Non-secret settings a frontend needs at startup."""

    tmdb_proxy_url: str = Field("", description="Optional external TMDB proxy base URL")
    cors_proxy_url: str = Field(..., description="Absolute URL of the playlist proxy")
    enable_local_image_cache: bool = Field(
        False, description="Whether images are cached by the gateway"
    )
    sync_enabled: bool = Field(False, description="Whether account sync is available")
    multi_user_mode: bool = Field(
        False, description="More than one access password is configured"
    )
    tmdb_enabled: bool = Field(False, description="A TMDB API key is configured")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "tmdb_proxy_url": "",
                "cors_proxy_url": "https://gateway.example/api/cors",
                "enable_local_image_cache": False,
                "sync_enabled": False,
                "multi_user_mode": False,
                "tmdb_enabled": True,
            },
        },
    )

    @classmethod
    def from_settings(cls, settings: Settings, cors_proxy_url: str) -> "ConfigResponse":
        return cls(
            tmdb_proxy_url=settings.tmdb_proxy_url,
            cors_proxy_url=cors_proxy_url,
            multi_user_mode=settings.multi_user_mode,
            tmdb_enabled=settings.tmdb_enabled,
        )
