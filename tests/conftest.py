"""Shared test fixtures for the Lobby test suite."""

from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from lobby.config import get_settings
from lobby.config.settings import set_toml_config


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def mock_toml_files(test_config_dir: Path) -> Callable[[dict[str, str]], None]:
    """Factory fixture to create TOML files in the test config directory.

    Usage:
        def test_something(mock_toml_files):
            mock_toml_files({
                "default.toml": "app_name = 'test'",
                "development.toml": "debug = true",
            })
    """

    def _create_toml_files(files: dict[str, str]) -> None:
        for filename, content in files.items():
            toml_file = test_config_dir / filename
            toml_file.write_text(content)

    return _create_toml_files


@pytest.fixture
def gateway_dir(tmp_path: Path) -> Path:
    """Directory holding a gateway configuration tree."""
    directory = tmp_path / "traefik"
    directory.mkdir()
    return directory


@pytest.fixture
def write_gateway_file(gateway_dir: Path) -> Callable[[str, str], Path]:
    """Factory fixture writing a file below the gateway directory.

    Usage:
        def test_something(write_gateway_file):
            root = write_gateway_file("traefik.toml", "[http.routers.a]\\n...")
    """

    def _write(relative_path: str, content: str) -> Path:
        path = gateway_dir / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _write


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Isolate configuration between tests.

    Clears the cached settings and the TOML source, and selects an
    environment with no override file.
    """
    monkeypatch.setenv("LOBBY_ENV", "test")
    get_settings.cache_clear()
    set_toml_config({})
    yield
    get_settings.cache_clear()
    set_toml_config({})

