"""Error response models for consistent API error handling."""

from enum import Enum

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Standardized error codes for API responses."""

    GATEWAY_CONFIG_ERROR = "GATEWAY_CONFIG_ERROR"
    """The gateway configuration could not be read and the failure policy is strict."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    """An unexpected internal error occurred."""


class ErrorBody(BaseModel):
    """Error body content for API error responses."""

    code: ErrorCode
    """Machine-readable error code."""

    message: str
    """Human-readable error message."""

    path: str | None = None
    """Configuration path involved in the failure, if any."""


class ErrorResponse(BaseModel):
    """Top-level error response envelope."""

    error: ErrorBody
