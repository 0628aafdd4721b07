"""Health endpoints."""

from datetime import UTC, datetime

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from docs_site import __version__
from docs_site.config import Settings, get_settings
from docs_site.exceptions import ConfigurationException
from docs_site.models import DetailedHealthResponse, HealthResponse
from docs_site.views.page_renderer import PageRenderer

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check endpoint.

    Returns simple status for Docker healthcheck and basic monitoring.
    For template and content availability, use `/health/ready`.
    """
    return HealthResponse(status="ok", version=__version__)


@router.get("/health/ready", response_model=DetailedHealthResponse)
async def readiness_check(settings: Settings = Depends(get_settings)):
    """Readiness probe - can the application serve pages?

    Checks:
    - Shared header and footer templates resolve and compile from the include path
    - The content directory exists

    **Returns:**
    - 200: Application is ready to serve pages
    - 503: A template is missing or invalid, or the content directory is missing
    """
    checks = {}
    all_healthy = True

    try:
        PageRenderer(settings.include_path, site_name=settings.site_name).load_templates()
        checks["templates"] = "ok"
    except ConfigurationException as e:
        checks["templates"] = f"failed: {e.message}"
        all_healthy = False

    if settings.content_path.is_dir():
        checks["content"] = "ok"
    else:
        checks["content"] = "failed: content directory missing"
        all_healthy = False

    status_code = 200 if all_healthy else 503
    status = "healthy" if all_healthy else "unhealthy"

    return JSONResponse(
        status_code=status_code,
        content=DetailedHealthResponse(
            status=status,
            version=__version__,
            timestamp=datetime.now(UTC),
            checks=checks,
        ).model_dump(mode="json"),
    )
