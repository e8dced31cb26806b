"""Access password endpoints."""

import logging

from fastapi import APIRouter

from vodgate.presentation.api.dependencies import AccessServiceDep
from vodgate.presentation.api.schemas.auth import (
    AuthCheckResponse,
    VerifyRequest,
    VerifyResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/check",
    summary="Check whether a password is required",
)
async def check(service: AccessServiceDep) -> AuthCheckResponse:
    status = service.status()
    return AuthCheckResponse(
        require_password=status.require_password,
        multi_user_mode=status.multi_user_mode,
    )


@router.post(
    "/verify",
    summary="Verify an access password",
    response_model=VerifyResponse,
    response_model_exclude_none=True,
    responses={
        200: {"description": "Verification outcome; failures are not HTTP errors"},
        400: {"description": "Malformed request body"},
    },
)
async def verify(request: VerifyRequest, service: AccessServiceDep) -> VerifyResponse:
    """
    Verify a presented password.

    On success the hex SHA-256 of the password is returned for the client
    to keep. A wrong password answers `{"success": false}` with status 200.
    """
    result = service.verify(request.password)
    if not result.success:
        logger.info("Rejected access password")
        return VerifyResponse(success=False)
    return VerifyResponse(
        success=True,
        password_hash=result.password_hash,
        sync_enabled=False,
    )
