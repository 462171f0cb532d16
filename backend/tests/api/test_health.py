"""Tests for health check endpoints."""

from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import ServiceContainer
from shared.config import Settings


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_root_status(self, client):
        """Root endpoint should return 200 with status OK."""
        response = client.get("/")
        assert response.status_code == 200
        assert response.json() == {"status": "OK"}

    def test_health_check(self, client):
        """Health endpoint should return 200 with status and version."""
        response = client.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"

    def test_health_response_structure(self, client):
        """Health response should have correct structure."""
        data = client.get("/api/health").json()
        assert set(data.keys()) == {"status", "version"}

    def test_root_needs_no_store(self):
        """The root route should answer without any store configured."""
        bare = create_app(ServiceContainer(Settings(_env_file=None)))
        response = TestClient(bare).get("/")
        assert response.status_code == 200
