"""Discovered routes as JSON."""

from fastapi import APIRouter

from lobby.api.dependencies import ResolverDep, SettingsDep
from lobby.api.models.routes import RouteEntry, RoutesResponse
from lobby.api.services.routes import load_routes

router = APIRouter(prefix="/api")


@router.get("/routes", response_model=RoutesResponse)
async def list_routes(settings: SettingsDep, resolver: ResolverDep) -> RoutesResponse:
    """List the services and path prefixes shown on the home page."""
    routes = await load_routes(settings, resolver)
    return RoutesResponse(
        routes=[
            RouteEntry(service=service, path=path)
            for service, path in sorted(routes.items())
        ]
    )
