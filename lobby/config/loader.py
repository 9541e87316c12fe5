"""Layered TOML configuration files.

Layers are read from the config directory in order, each optional:
``default.toml`` then ``{LOBBY_ENV}.toml``. Later layers are deep-merged
over earlier ones.
"""

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_DIR_ENV = "LOBBY_CONFIG_DIR"
ENVIRONMENT_ENV = "LOBBY_ENV"

# cwd and this many parents are searched for a config/ directory
_SEARCH_DEPTH = 4


def get_config_dir() -> Path:
    """Get the configuration directory.

    ``LOBBY_CONFIG_DIR`` wins when set and must exist. Otherwise the first
    ``config/`` found in the working directory or its parents is used, and
    ``config`` relative to the working directory when there is none.
    """
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        path = Path(override)
        if not path.is_dir():
            raise FileNotFoundError(f"Config directory not found: {override}")
        return path

    cwd = Path.cwd()
    for directory in [cwd, *cwd.parents][: _SEARCH_DEPTH + 1]:
        if (directory / "config").is_dir():
            return directory / "config"
    return Path("config")


def get_environment() -> str:
    """Name of the environment layer, ``development`` unless LOBBY_ENV is set."""
    return os.environ.get(ENVIRONMENT_ENV, "development")


def config_layers(config_dir: Path, environment: str) -> list[Path]:
    """Paths of the configuration layers, lowest precedence first."""
    return [config_dir / "default.toml", config_dir / f"{environment}.toml"]


def load_toml(file_path: Path) -> dict[str, Any]:
    """Load one layer. A missing file is an empty layer.

    Raises:
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    try:
        with file_path.open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        return {}


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge ``override`` into a copy of ``base``; nested tables merge recursively."""
    result = dict(base)
    for key, value in override.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
        else:
            result[key] = value
    return result


def load_config() -> dict[str, Any]:
    """Read and merge every configuration layer."""
    config: dict[str, Any] = {}
    for layer in config_layers(get_config_dir(), get_environment()):
        config = deep_merge(config, load_toml(layer))
    return config
