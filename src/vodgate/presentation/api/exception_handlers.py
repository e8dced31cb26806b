"""
Centralized exception handlers for the FastAPI application.

This module maps domain exceptions to HTTP responses. Every error body has
the same shape, ``{"error": <message>, "code": <error code>}``, and carries
the permissive CORS headers so browser clients can read it.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from vodgate.domain.shared import (
    ConfigurationError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    MissingParameterError,
    UpstreamError,
    ValidationError,
)
from vodgate.presentation.api.cors import CORS_HEADERS

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND_MESSAGE = "API Not Found"


# Error code to HTTP status mapping
ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # 400 Bad Request
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.MISSING_PARAMETER: 400,
    ErrorCode.CONFIGURATION_MISSING: 400,
    # 404 Not Found
    ErrorCode.ENTITY_NOT_FOUND: 404,
    ErrorCode.SOURCE_NOT_FOUND: 404,
    ErrorCode.ROUTE_NOT_FOUND: 404,
    # 500 Internal Server Error
    ErrorCode.UPSTREAM_FAILED: 500,
    ErrorCode.UPSTREAM_TIMEOUT: 500,
    ErrorCode.UPSTREAM_MALFORMED: 500,
    ErrorCode.INTERNAL_ERROR: 500,
}


def _get_status_for_exception(exc: DomainException) -> int:
    """Get HTTP status code for a domain exception."""
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]

    # Fallback based on exception type
    if isinstance(exc, (ValidationError, MissingParameterError, ConfigurationError)):
        return 400
    if isinstance(exc, EntityNotFoundError):
        return 404
    if isinstance(exc, UpstreamError):
        return 500

    return 500


def _create_error_response(status_code: int, message: str, code: str) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content={"error": message, "code": code},
        headers=CORS_HEADERS,
    )


async def domain_exception_handler(
    request: Request,  # noqa: ARG001
    exc: DomainException,
) -> JSONResponse:
    """Handle all domain exceptions."""
    status_code = _get_status_for_exception(exc)

    if status_code >= 500:
        logger.error("Domain error: %s - %s", exc.code.value, exc.message)
    else:
        logger.warning("Domain error: %s - %s", exc.code.value, exc.message)

    return _create_error_response(status_code, exc.message, exc.code.value)


async def request_validation_handler(
    request: Request,  # noqa: ARG001
    exc: RequestValidationError,
) -> JSONResponse:
    """Handle malformed request bodies or query parameters."""
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    logger.warning("Request validation failed: %s", message)
    return _create_error_response(400, message, ErrorCode.VALIDATION_ERROR.value)


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    """Handle routing errors raised by the framework."""
    if exc.status_code == 404:
        logger.debug("No route for %s %s", request.method, request.url.path)
        return _create_error_response(
            404, ROUTE_NOT_FOUND_MESSAGE, ErrorCode.ROUTE_NOT_FOUND.value
        )
    return _create_error_response(
        exc.status_code, str(exc.detail), ErrorCode.VALIDATION_ERROR.value
    )


async def global_exception_handler(
    request: Request,  # noqa: ARG001
    exc: Exception,
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception("Unexpected error: %s", exc)
    return _create_error_response(500, str(exc), ErrorCode.INTERNAL_ERROR.value)


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(DomainException, domain_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, global_exception_handler)
