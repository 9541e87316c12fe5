"""Unit tests for the home page and routes endpoints."""

from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from lobby.api.app import create_app
from lobby.config.settings import Settings


def write_root_config(directory: Path) -> Path:
    """Write a root config with one provider file."""
    dynamic = directory / "dynamic"
    dynamic.mkdir()
    root = directory / "traefik.toml"
    root.write_text(
        "[http.routers.grafana]\n"
        'rule = "PathPrefix(`/grafana`)"\n'
        'service = "grafana"\n'
        "[http.routers.dashboard]\n"
        'rule = "Host(`traefik.local`)"\n'
        'service = "api@internal"\n'
        "[providers.file]\n"
        f"directory = '{dynamic}'\n"
    )
    (dynamic / "media.toml").write_text(
        "[http.routers.jellyfin]\n"
        'rule = "PathPrefix(`/jellyfin`)"\n'
        'service = "jellyfin"\n'
    )
    return root


@pytest.fixture
def settings(gateway_dir: Path, tmp_path: Path) -> Settings:
    """Settings pointing at a temporary gateway configuration."""
    return Settings(
        gateway={"config_file": write_root_config(gateway_dir)},
        dashboard={"title": "host", "mount_points": [str(tmp_path)]},
    )


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """Create test FastAPI app."""
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Test client."""
    return TestClient(app)


class TestHomePage:
    """Tests for GET /."""

    def test_lists_discovered_routes(self, client: TestClient) -> None:
        """Path-prefix routes from all documents are listed."""
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert 'href="/grafana"' in response.text
        assert 'href="/jellyfin"' in response.text
        assert "traefik.local" not in response.text

    def test_shows_disk_usage(self, client: TestClient, tmp_path: Path) -> None:
        """Configured mount points are displayed."""
        response = client.get("/")
        assert f'<dt class="df__path">{tmp_path}</dt>' in response.text

    def test_rereads_configuration_per_request(
        self, client: TestClient, settings: Settings
    ) -> None:
        """A route added between requests shows up without a restart."""
        client.get("/")
        with settings.gateway.config_file.open("a") as f:
            f.write(
                "[http.routers.wiki]\n"
                'rule = "PathPrefix(`/wiki`)"\n'
                'service = "wiki"\n'
            )

        assert 'href="/wiki"' in client.get("/").text

    def test_missing_configuration_still_renders(self, tmp_path: Path) -> None:
        """The page renders with no routes when the config is missing."""
        settings = Settings(
            gateway={"config_file": tmp_path / "missing.toml"},
            dashboard={"title": "host", "show_disk_space": False},
        )
        client = TestClient(create_app(settings))

        response = client.get("/")

        assert response.status_code == 200
        assert "data-service" not in response.text.split("<script")[0]

    def test_strict_policy_returns_bad_gateway(self, tmp_path: Path) -> None:
        """Under the raise policy a missing config is a 502 with an error body."""
        missing = tmp_path / "missing.toml"
        settings = Settings(
            gateway={"config_file": missing, "document_failure_policy": "raise"},
            dashboard={"show_disk_space": False},
        )
        client = TestClient(create_app(settings))

        response = client.get("/")

        assert response.status_code == 502
        error = response.json()["error"]
        assert error["code"] == "GATEWAY_CONFIG_ERROR"
        assert error["path"] == str(missing)

    def test_dummy_mode(self, tmp_path: Path) -> None:
        """Dummy mode lists placeholder routes without reading config."""
        settings = Settings(
            gateway={"config_file": tmp_path / "missing.toml"},
            dashboard={"dummy": True},
        )
        client = TestClient(create_app(settings))

        response = client.get("/")

        assert 'href="#foo"' in response.text
        assert 'href="#bar"' in response.text
        assert '<dt class="df__path">/</dt>' in response.text

    def test_request_id_header(self, client: TestClient) -> None:
        """Responses carry a request id."""
        response = client.get("/", headers={"X-Request-ID": "abc"})
        assert response.headers["X-Request-ID"] == "abc"


class TestFavicon:
    """Tests for GET /favicon.ico."""

    def test_not_found(self, client: TestClient) -> None:
        """No favicon is served."""
        response = client.get("/favicon.ico")

        assert response.status_code == 404
        assert response.content == b""


class TestRoutesEndpoint:
    """Tests for GET /api/routes."""

    def test_returns_routes_as_json(self, client: TestClient) -> None:
        """The routing table is returned sorted by service."""
        response = client.get("/api/routes")

        assert response.status_code == 200
        assert response.json() == {
            "routes": [
                {"service": "grafana", "path": "/grafana"},
                {"service": "jellyfin", "path": "/jellyfin"},
            ]
        }
