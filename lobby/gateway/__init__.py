"""Route discovery from Traefik TOML configuration.

    from lobby.gateway import ConfigResolver

    resolver = ConfigResolver()
    routes = await resolver.extract_routes(Path("/etc/traefik/traefik.toml"))
"""

from lobby.gateway.errors import (
    DirectoryUnlistableError,
    DocumentMalformedError,
    DocumentUnreadableError,
    GatewayConfigError,
)
from lobby.gateway.models import RouteRule, RoutingDocument, RoutingTable
from lobby.gateway.resolver import ConfigResolver
from lobby.gateway.rules import parse_path_prefix

__all__ = [
    "ConfigResolver",
    "DirectoryUnlistableError",
    "DocumentMalformedError",
    "DocumentUnreadableError",
    "GatewayConfigError",
    "RouteRule",
    "RoutingDocument",
    "RoutingTable",
    "parse_path_prefix",
]
