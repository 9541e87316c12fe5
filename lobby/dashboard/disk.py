"""Filesystem capacity for the mount points shown on the home page."""

import asyncio
import os
from dataclasses import dataclass

from lobby.observability.logging import get_logger

logger = get_logger(__name__)

ONE_MB = 1024 * 1024
ONE_GB = 1024 * ONE_MB


@dataclass(frozen=True)
class DiskSpace:
    """Capacity of one filesystem, in bytes."""

    free: int
    used: int
    total: int


@dataclass(frozen=True)
class MountUsage:
    """Capacity of a mount point, ready for display."""

    path: str
    space: DiskSpace

    @property
    def free_human(self) -> str:
        return format_size(self.space.free)

    @property
    def total_human(self) -> str:
        return format_size(self.space.total)


async def get_disk_space(path: str) -> DiskSpace:
    """Read capacity of the filesystem holding ``path``.

    Raises:
        OSError: If the path does not exist or cannot be queried
    """
    stat = await asyncio.to_thread(os.statvfs, path)
    return DiskSpace(
        free=stat.f_bavail * stat.f_frsize,
        used=(stat.f_blocks - stat.f_bavail) * stat.f_frsize,
        total=stat.f_blocks * stat.f_frsize,
    )


def format_size(n_bytes: int) -> str:
    """Format a byte count in GB from 2 GB upwards, otherwise in MB."""
    if n_bytes >= 2 * ONE_GB:
        return f"{_format_number(n_bytes / ONE_GB)} GB"
    return f"{_format_number(n_bytes / ONE_MB)} MB"


def _format_number(value: float) -> str:
    text = f"{value:,.2f}"
    return text.rstrip("0").rstrip(".")


async def collect_disk_usage(mount_points: list[str]) -> list[MountUsage]:
    """Read all mount points concurrently, leaving out the ones that fail."""
    results = await asyncio.gather(
        *(get_disk_space(path) for path in mount_points),
        return_exceptions=True,
    )

    usage: list[MountUsage] = []
    for path, result in zip(mount_points, results, strict=True):
        if isinstance(result, OSError):
            logger.warning("disk_space_unavailable", path=path, error=str(result))
            continue
        if isinstance(result, BaseException):
            raise result
        usage.append(MountUsage(path=path, space=result))
    return usage
