"""API route registration."""

from fastapi import FastAPI

from lobby.config.settings import Settings
from lobby.observability.logging import get_logger

logger = get_logger(__name__)


def register_routes(app: FastAPI, settings: Settings) -> None:
    """Register all routes with the FastAPI application.

    Args:
        app: FastAPI application instance
        settings: Settings deciding which optional endpoints exist
    """
    from lobby.api.routes.gateway import router as gateway_router
    from lobby.api.routes.health import get_metrics
    from lobby.api.routes.health import router as health_router
    from lobby.api.routes.home import router as home_router

    app.include_router(home_router, tags=["Dashboard"])
    app.include_router(gateway_router, tags=["Routes"])
    app.include_router(health_router, tags=["Health"])

    if settings.observability.metrics.enabled:
        app.add_api_route(
            settings.observability.metrics.path,
            get_metrics,
            methods=["GET"],
            tags=["Health"],
        )

    logger.info("routes_registered", metrics=settings.observability.metrics.enabled)
