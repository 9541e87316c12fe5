"""Gateway configuration errors.

These are raised only when the resolver is configured with the ``raise``
failure policy. Under the default ``skip`` policy the same conditions are
logged and contribute no routes.
"""

from pathlib import Path


class GatewayConfigError(Exception):
    """Base exception for gateway configuration discovery failures."""

    error_type: str = "gateway_config_error"

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class DocumentUnreadableError(GatewayConfigError):
    """Raised when a configuration document cannot be read."""

    error_type = "document_unreadable"


class DocumentMalformedError(GatewayConfigError):
    """Raised when a configuration document is not valid TOML or has the wrong shape."""

    error_type = "document_malformed"


class DirectoryUnlistableError(GatewayConfigError):
    """Raised when a provider directory cannot be listed."""

    error_type = "directory_unlistable"
