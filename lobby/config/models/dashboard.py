"""Dashboard page configuration models."""

from pydantic import BaseModel, Field, field_validator


class DashboardConfig(BaseModel):
    """What the home page shows."""

    title: str | None = Field(
        default=None,
        description="Page title (defaults to the host name)",
    )
    mount_points: list[str] = Field(
        default=["/", "/media/workfiles"],
        description="Mount points whose capacity is displayed",
    )
    show_disk_space: bool = Field(default=True, description="Display disk capacity")
    dummy: bool = Field(
        default=False,
        description="Serve placeholder routes without reading gateway config",
    )

    @field_validator("mount_points", mode="before")
    @classmethod
    def parse_mount_points(cls, v: str | list[str]) -> list[str]:
        """Parse mount points from a comma separated string or list."""
        if isinstance(v, str):
            return [mount.strip() for mount in v.split(",") if mount.strip()]
        return v
