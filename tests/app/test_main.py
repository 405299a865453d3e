"""
Unit tests for the FastAPI application.

These tests verify that the app mounts the webinar router, that the
health endpoint works, and that CORS and OpenAPI are wired.
"""

import pytest
from fastapi.testclient import TestClient


class TestAppHealth:
    """Tests for the health endpoint."""

    def test_health_endpoint_returns_ok(self, test_client):
        """The /health endpoint should return status ok."""
        response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_health_endpoint_includes_service_name(self, test_client):
        """The /health endpoint should include the service name."""
        response = test_client.get("/health")

        assert "service" in response.json()

    def test_health_ignores_bad_credentials(self, test_client):
        """Health checks are public and skip viewer resolution."""
        response = test_client.get("/health", headers={"Authorization": "Bearer garbage"})

        assert response.status_code == 200


class TestAppRouterMounting:
    """Tests for router mounting."""

    def test_webinars_router_mounted(self, test_client):
        """The catalog is served under /webinars."""
        paths = test_client.get("/openapi.json").json()["paths"]

        assert "/webinars" in paths
        assert "/webinars/mine" in paths
        assert "/webinars/{item_id}" in paths


class TestAppCORS:
    """Tests for CORS configuration."""

    def test_cors_allows_localhost_origin(self, test_client):
        """CORS should allow requests from localhost development servers."""
        response = test_client.options(
            "/health",
            headers={
                "Origin": "http://localhost:5173",
                "Access-Control-Request-Method": "GET",
            },
        )

        assert "access-control-allow-origin" in response.headers


class TestAppOpenAPI:
    """Tests for OpenAPI documentation."""

    def test_openapi_schema_available(self, test_client):
        """The OpenAPI schema should be accessible at /openapi.json."""
        response = test_client.get("/openapi.json")

        assert response.status_code == 200
        assert "openapi" in response.json()

    def test_docs_endpoint_available(self, test_client):
        """The Swagger UI should be accessible at /docs."""
        response = test_client.get("/docs")

        assert response.status_code == 200


# --- Fixtures ---


@pytest.fixture
def test_client():
    """
    Provides a TestClient for the FastAPI app.
    """
    from app.main import app

    return TestClient(app)
