"""Gateway (Traefik) configuration discovery models."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

FailurePolicy = Literal["skip", "raise"]


class GatewayConfig(BaseModel):
    """Where to find the gateway configuration and how to treat failures."""

    config_file: Path = Field(
        default=Path("/etc/traefik/traefik.toml"),
        description="Root Traefik configuration file",
    )
    provider_file_suffixes: list[str] = Field(
        default=[".toml"],
        description="Suffixes of provider directory entries to read (empty = all)",
    )
    document_failure_policy: FailurePolicy = Field(
        default="skip",
        description="What to do with unreadable or malformed documents",
    )
    directory_failure_policy: FailurePolicy = Field(
        default="skip",
        description="What to do when a provider directory cannot be listed",
    )
    guard_directory_cycles: bool = Field(
        default=True,
        description="Skip provider directories already expanded on the current branch",
    )

    @field_validator("provider_file_suffixes", mode="before")
    @classmethod
    def parse_suffixes(cls, v: str | list[str]) -> list[str]:
        """Parse suffixes from a comma separated string or list."""
        if isinstance(v, str):
            return [suffix.strip() for suffix in v.split(",") if suffix.strip()]
        return v
