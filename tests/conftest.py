"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from docs_site.config import Settings, get_settings
from docs_site.core.middleware import limiter
from docs_site.main import app as fastapi_app

HEADER = "<!DOCTYPE html>\n<html>\n<head><title>{{ page_title }}</title></head>\n<body>\n<p>{{ site_name }}</p>"
FOOTER = "<p>end of {{ site_name }}</p>\n</body>\n</html>"


@pytest.fixture(autouse=True)
def reset_app_state():
    """Start every test with fresh rate limits and no dependency overrides."""
    limiter.reset()
    yield
    fastapi_app.dependency_overrides.clear()
    limiter.reset()


@pytest.fixture
def test_client():
    """FastAPI test client with lifespan context."""
    with TestClient(fastapi_app) as client:
        yield client


@pytest.fixture
def include_dir(tmp_path: Path) -> Path:
    """Include path holding minimal header and footer templates."""
    path = tmp_path / "includes"
    path.mkdir()
    (path / "header.html").write_text(HEADER, encoding="utf-8")
    (path / "footer.html").write_text(FOOTER, encoding="utf-8")
    return path


@pytest.fixture
def override_settings():
    """Return a function that swaps the app settings for the current test."""

    def _override(**kwargs) -> Settings:
        settings = Settings(**kwargs)
        fastapi_app.dependency_overrides[get_settings] = lambda: settings
        return settings

    return _override
