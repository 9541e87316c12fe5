"""Configuration loading for Lobby.

Configuration is loaded from TOML files with environment variable overrides.

Usage:
    from lobby.config import get_settings

    settings = get_settings()
    config_file = settings.gateway.config_file
"""

from functools import lru_cache
from typing import Any

from lobby.config.loader import load_config
from lobby.config.settings import Settings, set_toml_config


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the singleton settings instance.

    Configuration is loaded in this order:
    1. Pydantic model defaults (in code)
    2. config/default.toml (base configuration)
    3. config/{LOBBY_ENV}.toml (environment overrides)
    4. LOBBY_* environment variables (runtime overrides)

    The result is cached for the lifetime of the process.
    Call `get_settings.cache_clear()` to reload configuration.
    """
    set_toml_config(load_config())
    return Settings()


def reload_settings() -> Settings:
    """Clear the settings cache and reload configuration."""
    get_settings.cache_clear()
    return get_settings()


def build_settings(**overrides: Any) -> Settings:
    """Build uncached settings with explicit overrides on top of every source.

    Used by the command line, where flags take precedence over files and
    environment variables. Nested sections are given as dicts and merged
    with the other sources.
    """
    set_toml_config(load_config())
    return Settings(**overrides)


__all__ = ["build_settings", "get_settings", "reload_settings", "Settings"]
