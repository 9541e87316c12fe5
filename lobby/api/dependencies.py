"""Dependency injection for API routes.

Objects are created once by the application factory and kept on
``app.state``; these dependencies hand them to route functions and can be
overridden in tests.
"""

from typing import Annotated

from fastapi import Depends, Request

from lobby.config.settings import Settings
from lobby.dashboard.renderer import DashboardRenderer
from lobby.gateway.resolver import ConfigResolver


def get_settings(request: Request) -> Settings:
    """Get the settings the application was created with."""
    return request.app.state.settings


def get_resolver(request: Request) -> ConfigResolver:
    """Get the gateway configuration resolver."""
    return request.app.state.resolver


def get_renderer(request: Request) -> DashboardRenderer:
    """Get the home page renderer."""
    return request.app.state.renderer


SettingsDep = Annotated[Settings, Depends(get_settings)]
ResolverDep = Annotated[ConfigResolver, Depends(get_resolver)]
RendererDep = Annotated[DashboardRenderer, Depends(get_renderer)]
