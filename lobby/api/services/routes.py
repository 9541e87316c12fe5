"""Route discovery for request handlers."""

from lobby.api.exceptions import GatewayConfigUnavailableError
from lobby.config.settings import Settings
from lobby.gateway.errors import GatewayConfigError
from lobby.gateway.models import RoutingTable
from lobby.gateway.resolver import ConfigResolver

DUMMY_ROUTES: RoutingTable = {"foo": "#foo", "bar": "#bar"}
DUMMY_MOUNT_POINTS = ["/"]


async def load_routes(settings: Settings, resolver: ConfigResolver) -> RoutingTable:
    """Discover the routes to display for this request.

    Dummy mode returns placeholder routes without touching the filesystem.

    Raises:
        GatewayConfigUnavailableError: If discovery fails under a strict
            failure policy
    """
    if settings.dashboard.dummy:
        return dict(DUMMY_ROUTES)

    try:
        return await resolver.extract_routes(settings.gateway.config_file)
    except GatewayConfigError as e:
        raise GatewayConfigUnavailableError(
            f"Gateway configuration unavailable: {e.reason}",
            path=str(e.path),
        ) from e


def mount_points(settings: Settings) -> list[str]:
    """Mount points whose capacity is shown on the home page."""
    if not settings.dashboard.show_disk_space:
        return []
    if settings.dashboard.dummy:
        return list(DUMMY_MOUNT_POINTS)
    return settings.dashboard.mount_points
