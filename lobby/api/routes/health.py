"""Health check and metrics endpoints."""

import asyncio
import os
from pathlib import Path
from typing import Literal

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from lobby import __version__
from lobby.api.dependencies import SettingsDep
from lobby.api.models.health import ComponentHealth, HealthResponse
from lobby.config.settings import Settings
from lobby.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


def _is_readable_file(path: Path) -> bool:
    return path.is_file() and os.access(path, os.R_OK)


async def _check_gateway_config(settings: Settings) -> ComponentHealth:
    """Check that the root gateway configuration file can be read.

    An unreadable file does not break the page, which then lists no
    routes, so it is reported as degraded rather than unhealthy.
    """
    if settings.dashboard.dummy:
        return ComponentHealth(
            name="gateway_config", status="healthy", message="dummy mode"
        )

    path = settings.gateway.config_file
    if await asyncio.to_thread(_is_readable_file, path):
        return ComponentHealth(name="gateway_config", status="healthy")
    return ComponentHealth(
        name="gateway_config",
        status="degraded",
        message=f"Cannot read {path}",
    )


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: SettingsDep) -> HealthResponse:
    """Check service health status.

    Returns:
        HealthResponse with status and component health
    """
    logger.debug("health_check_request")

    components = [await _check_gateway_config(settings)]

    overall_status: Literal["healthy", "degraded", "unhealthy"]
    if any(c.status == "unhealthy" for c in components):
        overall_status = "unhealthy"
    elif any(c.status == "degraded" for c in components):
        overall_status = "degraded"
    else:
        overall_status = "healthy"

    logger.debug("health_check_completed", status=overall_status)

    return HealthResponse(
        status=overall_status,
        version=__version__,
        components=components,
    )


async def get_metrics() -> Response:
    """Get Prometheus metrics in text format for scraping."""
    logger.debug("metrics_request")

    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST,
    )
