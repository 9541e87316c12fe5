"""Jinja2 rendering of the home page."""

import socket
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from lobby.dashboard.disk import MountUsage
from lobby.gateway.models import RoutingTable

PACKAGE_DIR = Path(__file__).parent


class DashboardRenderer:
    """Renders the home page from a routing table and disk usage.

    The stylesheet and the keyboard navigation script are read once and
    inlined into every page, so the page has no further asset requests.
    """

    def __init__(self, templates_dir: Path | None = None, title: str | None = None):
        """Initialize the renderer.

        Args:
            templates_dir: Directory containing .jinja2 templates
            title: Page title, defaults to the host name
        """
        self.templates_dir = templates_dir or PACKAGE_DIR / "templates"
        self.title = title or socket.gethostname()
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja2"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        static = PACKAGE_DIR / "static"
        self.style = (static / "main.css").read_text(encoding="utf-8")
        self.script = (static / "main.js").read_text(encoding="utf-8")

    def render(
        self,
        routes: RoutingTable,
        disk_usage: list[MountUsage] | None = None,
    ) -> str:
        """Render the home page.

        Args:
            routes: Service name to path prefix
            disk_usage: Mount points to display, None or empty to hide the section

        Returns:
            HTML document
        """
        template = self.env.get_template("home.html.jinja2")
        return template.render(
            title=self.title,
            routes=sorted(routes.items()),
            disk_usage=disk_usage or [],
            style=self.style,
            script=self.script,
        )
