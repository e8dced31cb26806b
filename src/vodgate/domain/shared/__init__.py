"""Shared domain building blocks."""

from vodgate.domain.shared.exceptions import (
    ConfigurationError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    MissingParameterError,
    SourceNotFoundError,
    UpstreamError,
    ValidationError,
)

__all__ = [
    "ConfigurationError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "MissingParameterError",
    "SourceNotFoundError",
    "UpstreamError",
    "ValidationError",
]
