"""Authentication schemas for access gating."""

from pydantic import BaseModel, ConfigDict, Field


class AuthCheckResponse(BaseModel):
    """Whether the gateway expects an access password."""

    require_password: bool = Field(..., alias="requirePassword")
    multi_user_mode: bool = Field(..., alias="multiUserMode")

    model_config = ConfigDict(populate_by_name=True)


class VerifyRequest(BaseModel):
    """Password presented by a client."""

    password: str | None = Field(None, description="Candidate access password")


class VerifyResponse(BaseModel):
    """Result of a password verification.

    On failure only ``success`` is serialized.
    """

    success: bool
    password_hash: str | None = Field(None, alias="passwordHash")
    sync_enabled: bool | None = Field(None, alias="syncEnabled")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "success": True,
                "passwordHash": "5e884898da28047151d0e56f8dc6292773603d0d6aabbdd62a11ef721d1542d8",
                "syncEnabled": False,
            },
        },
    )
