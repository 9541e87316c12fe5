"""Parsed gateway configuration documents."""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from lobby.observability.logging import get_logger

logger = get_logger(__name__)

# service name -> path prefix
RoutingTable = dict[str, str]


class RouteRule(BaseModel):
    """A router definition: a rule expression and the service it targets.

    Only the two keys used for discovery are kept; entry points,
    middlewares, TLS options and the like are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    rule: str = ""
    """Rule expression in the gateway's matcher language."""

    service: str | None = None
    """Name of the backend service, if declared."""


class RoutingDocument(BaseModel):
    """Routing-relevant content of one configuration file."""

    model_config = ConfigDict(frozen=True)

    routers: dict[str, RouteRule] = Field(default_factory=dict)
    """Routers declared under ``http.routers``."""

    provider_directory: Path | None = None
    """Directory declared under ``providers.file.directory``."""

    @field_validator("provider_directory", mode="before")
    @classmethod
    def empty_directory_is_none(cls, v: Any) -> Any:
        """Treat an empty directory string as no directory."""
        if v == "":
            return None
        if v is not None and not isinstance(v, str):
            raise ValueError("providers.file.directory must be a string")
        return v

    @classmethod
    def from_toml(cls, data: dict[str, Any]) -> "RoutingDocument":
        """Build a document from a parsed TOML mapping.

        Absent sections default to empty. A section present with the wrong
        type raises ``pydantic.ValidationError`` or ``ValueError``. Single
        router entries that are not usable (not a table, or a non-string
        ``rule`` or ``service``) are dropped and the rest of the document
        is kept.
        """
        http = _table(data, "http")
        file_provider = _table(_table(data, "providers"), "file")

        routers: dict[str, dict[str, Any]] = {}
        for name, entry in _table(http, "routers").items():
            if not _is_usable_router(entry):
                logger.debug("gateway_router_ignored", router=name)
                continue
            routers[name] = entry

        return cls.model_validate(
            {
                "routers": routers,
                "provider_directory": file_provider.get("directory"),
            }
        )


def _is_usable_router(entry: Any) -> bool:
    if not isinstance(entry, dict):
        return False
    return isinstance(entry.get("rule", ""), str) and isinstance(
        entry.get("service", ""), str
    )


def _table(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"'{key}' must be a table, got {type(value).__name__}")
    return value
