"""Tests for health check endpoints."""

from fastapi.testclient import TestClient

from api.app import app


client = TestClient(app)


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check(self):
        """Health endpoint should return 200 with status."""
        response = client.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"

    def test_health_response_structure(self):
        """Health response should have correct structure."""
        response = client.get("/api/health")
        assert set(response.json().keys()) == {"status", "version"}

    def test_health_needs_no_token(self):
        response = client.get("/api/health")
        assert response.status_code == 200

    def test_unknown_route_uses_error_shape(self):
        response = client.get("/api/nothing-here")
        assert response.status_code == 404
        assert response.json() == {"errors": [{"msg": "Not Found"}]}
