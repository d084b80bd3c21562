"""
Tests for the main application module.
"""

from fastapi.testclient import TestClient

from weather_widget.main import app


class TestMainApplication:
    """Test suite for main FastAPI application configuration."""

    def test_app_creation(self):
        assert app.title == "Weather Widget"
        assert app.version == "1.0.0"
        assert app.docs_url == "/docs"

    def test_middleware_added(self):
        """Test CORS and request tracking middleware are installed."""
        middleware_classes = str([m.cls.__name__ for m in app.user_middleware])

        assert "CORSMiddleware" in middleware_classes
        assert "RequestTrackerMiddleware" in middleware_classes

    def test_routes_included(self):
        routes = [route.path for route in app.routes]

        assert "/" in routes
        assert "/weather" in routes
        assert "/weather/location" in routes
        assert "/health" in routes
        assert "/prometheus-metrics" in routes

    def test_lifespan_opens_and_closes_http_client(self):
        """Test the shared HTTP client lives for the application's lifetime."""
        with TestClient(app) as client:
            response = client.get("/health")
            http_client = app.state.http_client

            assert response.status_code == 200
            assert response.json()["status"] == "healthy"
            assert not http_client.is_closed

        assert http_client.is_closed

    def test_request_tracking_headers(self):
        client = TestClient(app)

        response = client.get("/")

        assert response.headers["X-Request-ID"].startswith("req_")
        assert "X-Process-Time" in response.headers
