"""Tests for structured logging."""

import json
from collections.abc import Generator

import pytest
import structlog

from lobby.observability.logging import get_logger, setup_logging


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Restore structlog's default configuration after each test."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_json_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        """JSON format writes one JSON object per event to stdout."""
        setup_logging(level="INFO", format="json")

        get_logger("test").info("routes_discovered", count=2)

        line = capsys.readouterr().out.strip().splitlines()[-1]
        event = json.loads(line)
        assert event["event"] == "routes_discovered"
        assert event["count"] == 2
        assert event["level"] == "info"
        assert "timestamp" in event

    def test_console_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Console format writes a readable line."""
        setup_logging(level="DEBUG", format="console")

        get_logger("test").debug("reading_gateway_config", path="/etc/traefik/traefik.toml")

        assert "reading_gateway_config" in capsys.readouterr().out

    def test_level_filters(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Events below the configured level are dropped."""
        setup_logging(level="WARNING", format="json")

        get_logger("test").info("hidden")
        get_logger("test").warning("shown")

        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out

    def test_context_binding(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Context bound via contextvars appears in events."""
        setup_logging(level="INFO", format="json")
        structlog.contextvars.bind_contextvars(request_id="req-1")

        get_logger("test").info("request_started")

        event = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert event["request_id"] == "req-1"
