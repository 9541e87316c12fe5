"""Home page endpoints."""

from fastapi import APIRouter, Response
from fastapi.responses import HTMLResponse

from lobby.api.dependencies import RendererDep, ResolverDep, SettingsDep
from lobby.api.services.routes import load_routes, mount_points
from lobby.dashboard.disk import collect_disk_usage
from lobby.observability.logging import get_logger
from lobby.observability.metrics import PAGE_RENDERS

logger = get_logger(__name__)

router = APIRouter()


@router.get("/favicon.ico", include_in_schema=False)
async def favicon() -> Response:
    """No favicon is served; answer quickly instead of rendering the page."""
    return Response(status_code=404)


@router.get("/", response_class=HTMLResponse)
async def home(
    settings: SettingsDep,
    resolver: ResolverDep,
    renderer: RendererDep,
) -> HTMLResponse:
    """Render the home page.

    Routes and disk usage are read again on every request.
    """
    routes = await load_routes(settings, resolver)
    disk_usage = await collect_disk_usage(mount_points(settings))

    html = renderer.render(routes, disk_usage)

    PAGE_RENDERS.labels(mode="dummy" if settings.dashboard.dummy else "gateway").inc()
    logger.debug("home_page_rendered", routes=len(routes), mounts=len(disk_usage))

    return HTMLResponse(content=html)
