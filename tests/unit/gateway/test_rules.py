"""Unit tests for path-prefix rule recognition."""

import pytest

from lobby.gateway.rules import parse_path_prefix


class TestParsePathPrefix:
    """Tests for parse_path_prefix."""

    @pytest.mark.parametrize(
        "rule",
        [
            "PathPrefix(`/foo`)",
            "PathPrefix('/foo')",
            'PathPrefix("/foo")',
        ],
    )
    def test_quote_styles(self, rule: str) -> None:
        """Every supported quote character yields the literal."""
        assert parse_path_prefix(rule) == "/foo"

    def test_surrounding_whitespace_ignored(self) -> None:
        """Whitespace around the rule and the literal is tolerated."""
        assert parse_path_prefix("  PathPrefix( `/foo` ) ") == "/foo"

    def test_nested_path(self) -> None:
        """The full literal is kept, including inner slashes."""
        assert parse_path_prefix("PathPrefix(`/apps/grafana/`)") == "/apps/grafana/"

    def test_other_quote_inside_literal(self) -> None:
        """A different quote character inside the literal is part of it."""
        assert parse_path_prefix("PathPrefix(`/it's`)") == "/it's"

    @pytest.mark.parametrize(
        "rule",
        [
            "Host(`example.com`)",
            "Path(`/foo`)",
            "PathPrefix(`/foo`) && Host(`example.com`)",
            "Host(`example.com`) && PathPrefix(`/foo`)",
            "PathPrefix(`/a`, `/b`)",
            "PathPrefix(`/foo')",
            "PathPrefix(/foo)",
            "pathprefix(`/foo`)",
            "",
        ],
    )
    def test_unsupported_shapes(self, rule: str) -> None:
        """Anything but a single quoted literal is not recognized."""
        assert parse_path_prefix(rule) is None
