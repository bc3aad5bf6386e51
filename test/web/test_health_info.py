"""Tests for the health and info endpoints."""

from intellisec.config import InfoPayload, ServiceSettings
from intellisec.web_server.web_server import create_app
from starlette.testclient import TestClient


class TestHealth:
    """Tests for GET /health."""

    def test_health_ok(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        assert response.json() == {"status": "ok", "service": "intellisec-backend-test"}

    def test_health_default_service_name(self):
        with TestClient(create_app()) as client:
            data = client.get("/health").json()

        assert data["status"] == "ok"
        assert data["service"] == "intellisec-backend"

    def test_health_rejects_post(self, client):
        response = client.post("/health")

        assert response.status_code == 405
        assert response.json()["code"] == "METHOD_NOT_ALLOWED"


class TestInfo:
    """Tests for GET /api/info."""

    def test_info_defaults(self, client):
        response = client.get("/api/info")

        assert response.status_code == 200
        assert response.json() == {
            "name": "IntelliSec",
            "version": "0.1.0",
            "description": "AI-driven Security Platform - backend",
        }

    def test_info_fields_are_non_empty_strings(self, client):
        data = client.get("/api/info").json()

        assert set(data) == {"name", "version", "description"}
        for value in data.values():
            assert isinstance(value, str)
            assert value

    def test_info_is_identical_across_calls(self, client):
        first = client.get("/api/info").json()
        for _ in range(5):
            assert client.get("/api/info").json() == first

    def test_info_from_settings(self):
        settings = ServiceSettings(
            info=InfoPayload(name="Custom", version="9.9.9", description="Custom build")
        )
        with TestClient(create_app(settings=settings)) as client:
            data = client.get("/api/info").json()

        assert data == {"name": "Custom", "version": "9.9.9", "description": "Custom build"}


class TestCors:
    """CORS is enabled for all origins by default."""

    def test_simple_request_has_allow_origin(self, client):
        response = client.get("/api/info", headers={"Origin": "http://localhost:5173"})

        assert response.headers["access-control-allow-origin"] == "*"

    def test_preflight_scan(self, client):
        response = client.options(
            "/api/llm/scan",
            headers={
                "Origin": "http://localhost:5173",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "content-type",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"
        assert "POST" in response.headers["access-control-allow-methods"]

    def test_restricted_origins(self):
        settings = ServiceSettings(cors_allow_origins=("http://allowed.example",))
        with TestClient(create_app(settings=settings)) as client:
            allowed = client.get("/health", headers={"Origin": "http://allowed.example"})
            other = client.get("/health", headers={"Origin": "http://other.example"})

        assert allowed.headers["access-control-allow-origin"] == "http://allowed.example"
        assert "access-control-allow-origin" not in other.headers
