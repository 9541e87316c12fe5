"""Command line entry point: ``python -m lobby`` or ``lobby``.

Flags take precedence over LOBBY_* environment variables, which take
precedence over config/*.toml.
"""

import argparse
from pathlib import Path
from typing import Any

import uvicorn

from lobby import __description__, __version__
from lobby.api.app import create_app
from lobby.config import build_settings
from lobby.observability.logging import get_logger, setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line flags."""
    parser = argparse.ArgumentParser(prog="lobby", description=__description__)
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("-p", "--port", type=int, help="HTTP port to listen on")
    parser.add_argument("--host", help="Address to bind")
    parser.add_argument(
        "-c",
        "--traefik-config-file",
        type=Path,
        help="Path to traefik configuration file",
    )
    parser.add_argument(
        "--dummy",
        action="store_true",
        default=None,
        help="Run in dummy mode without reading Traefik config",
    )
    return parser.parse_args(argv)


def settings_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Translate flags that were given into nested settings overrides."""
    overrides: dict[str, Any] = {}
    api = {
        key: value
        for key, value in (("port", args.port), ("host", args.host))
        if value is not None
    }
    if api:
        overrides["api"] = api
    if args.traefik_config_file is not None:
        overrides["gateway"] = {"config_file": args.traefik_config_file}
    if args.dummy:
        overrides["dashboard"] = {"dummy": True}
    return overrides


def main(argv: list[str] | None = None) -> None:
    """Run the dashboard server."""
    args = parse_args(argv)
    settings = build_settings(**settings_overrides(args))

    setup_logging(
        level=settings.observability.logging.level,
        format=settings.observability.logging.format,
    )
    logger = get_logger("lobby")

    app = create_app(settings)
    logger.info(
        "server_starting",
        url=f"http://{format_host(settings.api.host)}:{settings.api.port}",
    )
    uvicorn.run(
        app,
        host=settings.api.host,
        port=settings.api.port,
        log_config=None,
        access_log=False,
    )


def format_host(host: str) -> str:
    """Bracket IPv6 literals for use in a URL."""
    if ":" in host and not host.startswith("["):
        return f"[{host}]"
    return host


if __name__ == "__main__":
    main()
