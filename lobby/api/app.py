"""FastAPI application factory.

Creates and configures the FastAPI application with middleware,
exception handlers, and route registration.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from lobby import __description__, __version__
from lobby.api.exceptions import LobbyAPIError
from lobby.api.middleware.context import RequestContextMiddleware
from lobby.api.models.errors import ErrorBody, ErrorCode, ErrorResponse
from lobby.api.routes import register_routes
from lobby.config import get_settings
from lobby.config.settings import Settings
from lobby.dashboard.renderer import DashboardRenderer
from lobby.gateway.resolver import ConfigResolver
from lobby.observability.logging import get_logger

logger = get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use, loaded from config files and the
            environment when omitted

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Lobby",
        description=__description__,
        version=__version__,
        debug=settings.debug,
    )

    app.state.settings = settings
    app.state.resolver = ConfigResolver(settings.gateway)
    app.state.renderer = DashboardRenderer(title=settings.dashboard.title)

    app.add_middleware(RequestContextMiddleware)

    _register_exception_handlers(app)
    register_routes(app, settings)

    logger.info(
        "app_created",
        debug=settings.debug,
        dummy=settings.dashboard.dummy,
        config_file=str(settings.gateway.config_file),
    )

    return app


def _register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers.

    Args:
        app: FastAPI application
    """

    @app.exception_handler(LobbyAPIError)
    async def lobby_api_error_handler(
        request: Request, exc: LobbyAPIError
    ) -> JSONResponse:
        """Handle LobbyAPIError and its subclasses."""
        logger.warning(
            "api_error",
            error_code=exc.error_code.value,
            message=exc.message,
            path=request.url.path,
        )

        error_body = ErrorBody(
            code=exc.error_code,
            message=exc.message,
            path=getattr(exc, "path", None),
        )

        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=error_body).model_dump(mode="json"),
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unexpected_error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
        )

        error_body = ErrorBody(
            code=ErrorCode.INTERNAL_ERROR,
            message="An unexpected error occurred",
        )

        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error=error_body).model_dump(mode="json"),
        )

    logger.debug("exception_handlers_registered")
