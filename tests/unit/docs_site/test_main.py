"""Unit tests for app wiring in main.py."""

from fastapi.testclient import TestClient
from slowapi.errors import RateLimitExceeded

from docs_site.exceptions import DocsSiteException
from docs_site.main import app


class TestExceptionHandlers:
    """Tests for registered exception handlers."""

    def test_docs_site_exception_handler_exists(self):
        assert DocsSiteException in app.exception_handlers

    def test_rate_limit_exceeded_handler(self):
        assert RateLimitExceeded in app.exception_handlers

    def test_general_exception_handler_exists(self):
        assert Exception in app.exception_handlers


class TestAppWiring:
    """Tests for routers, state and middleware."""

    def test_app_has_routes(self):
        """Health and page routes are published in the OpenAPI schema."""
        paths = app.openapi()["paths"]

        assert "/health" in paths
        assert "/health/ready" in paths
        assert "/{page_path}" in paths

    def test_catch_all_does_not_shadow_health_or_static(self):
        """Health and static requests never reach the page catch-all."""
        client = TestClient(app)

        health = client.get("/health")
        stylesheet = client.get("/static/css/site.css")

        assert health.status_code == 200
        assert health.json()["status"] == "ok"
        assert stylesheet.status_code == 200
        assert "text/css" in stylesheet.headers["content-type"]
        assert "PAGE_NOT_FOUND" not in stylesheet.text

    def test_app_state_has_limiter(self):
        from docs_site.main import limiter

        assert app.state.limiter is limiter
        assert limiter.enabled
