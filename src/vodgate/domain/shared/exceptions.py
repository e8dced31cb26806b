"""Shared domain exceptions and error codes.

This module defines the base exception hierarchy and error codes for the
gateway. All domain exceptions inherit from DomainException to enable
centralized exception handling in the presentation layer.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for API clients.

    These codes are part of the public API contract. Should not be changed.
    """

    # Validation Errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MISSING_PARAMETER = "MISSING_PARAMETER"

    # Configuration Errors (400)
    CONFIGURATION_MISSING = "CONFIGURATION_MISSING"

    # Not Found Errors (404)
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    SOURCE_NOT_FOUND = "SOURCE_NOT_FOUND"
    ROUTE_NOT_FOUND = "ROUTE_NOT_FOUND"

    # Upstream Errors (contained during fan-out)
    UPSTREAM_FAILED = "UPSTREAM_FAILED"
    UPSTREAM_TIMEOUT = "UPSTREAM_TIMEOUT"
    UPSTREAM_MALFORMED = "UPSTREAM_MALFORMED"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all domain-related errors.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged but not exposed to users)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationError(DomainException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class MissingParameterError(ValidationError):
    """Raised when a required request parameter is absent or empty."""

    def __init__(self, parameter: str, message: str | None = None) -> None:
        super().__init__(
            message or f"Missing {parameter}",
            ErrorCode.MISSING_PARAMETER,
            {"parameter": parameter},
        )


class EntityNotFoundError(DomainException):
    """Raised when a requested entity cannot be found."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.ENTITY_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class SourceNotFoundError(EntityNotFoundError):
    """Raised when a source key is not part of the resolved registry."""

    def __init__(self, site_key: str | None) -> None:
        super().__init__(
            "Site not found",
            ErrorCode.SOURCE_NOT_FOUND,
            {"site_key": site_key},
        )


class ConfigurationError(DomainException):
    """Raised when a pass-through feature lacks a required secret."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIGURATION_MISSING,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class UpstreamError(DomainException):
    """Raised when an outbound HTTP call fails.

    During fan-out search it is logged and the source is dropped.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.UPSTREAM_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)
