"""API exception hierarchy for consistent error handling.

All API exceptions inherit from LobbyAPIError, which provides
status_code and error_code attributes used by the global exception
handler to generate consistent error responses.
"""

from lobby.api.models.errors import ErrorCode


class LobbyAPIError(Exception):
    """Base exception for all API errors."""

    status_code: int = 500
    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class GatewayConfigUnavailableError(LobbyAPIError):
    """Raised when route discovery fails under a strict failure policy."""

    status_code = 502
    error_code = ErrorCode.GATEWAY_CONFIG_ERROR

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path
