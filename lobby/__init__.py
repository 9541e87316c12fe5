"""Lobby: a home page dashboard for hosts behind a Traefik gateway.

Discovers the path-prefix routes declared in the gateway's TOML
configuration, lists them as links, and shows disk capacity for a few
mount points.

Usage:
    from lobby.api.app import create_app

    app = create_app()
"""

from importlib.metadata import PackageNotFoundError, metadata

__version__ = "1.0.0"
__description__ = "Home page dashboard listing the routes of a Traefik gateway"

try:
    _metadata = metadata("lobby")
except PackageNotFoundError:
    pass
else:
    __version__ = _metadata["Version"]
    __description__ = _metadata.get("Summary") or __description__

__all__ = ["__description__", "__version__"]
