"""Home page rendering and disk capacity collection."""

from lobby.dashboard.disk import (
    DiskSpace,
    MountUsage,
    collect_disk_usage,
    format_size,
    get_disk_space,
)
from lobby.dashboard.renderer import DashboardRenderer

__all__ = [
    "DashboardRenderer",
    "DiskSpace",
    "MountUsage",
    "collect_disk_usage",
    "format_size",
    "get_disk_space",
]
