"""API request and response models."""

from lobby.api.models.errors import ErrorBody, ErrorCode, ErrorResponse
from lobby.api.models.health import ComponentHealth, HealthResponse
from lobby.api.models.routes import RouteEntry, RoutesResponse

__all__ = [
    "ComponentHealth",
    "ErrorBody",
    "ErrorCode",
    "ErrorResponse",
    "HealthResponse",
    "RouteEntry",
    "RoutesResponse",
]
