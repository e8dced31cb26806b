"""Pydantic schemas for API request/response models."""

from vodgate.presentation.api.schemas.auth import (
    AuthCheckResponse,
    VerifyRequest,
    VerifyResponse,
)
from vodgate.presentation.api.schemas.common import ErrorResponse, HealthResponse
from vodgate.presentation.api.schemas.config import ConfigResponse
from vodgate.presentation.api.schemas.debug import DebugResponse
from vodgate.presentation.api.schemas.sites import SiteResponse, SitesResponse

__all__ = [
    "AuthCheckResponse",
    "ConfigResponse",
    "DebugResponse",
    "ErrorResponse",
    "HealthResponse",
    "SiteResponse",
    "SitesResponse",
    "VerifyRequest",
    "VerifyResponse",
]
