"""Application factory for creating and configuring the FastAPI app."""

from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from docs_site import __version__
from docs_site.config import get_settings
from docs_site.core.lifespan import lifespan
from docs_site.core.middleware import setup_middleware
from docs_site.middleware.error_handlers import register_error_handlers
from docs_site.routers import health_router, page_router

STATIC_DIR = Path(__file__).parent.parent / "static"


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="Docs Site",
        description="""
        Developer documentation pages, each assembled from the shared header
        and footer templates around a static article body.

        ## Health & Monitoring
        - `/health` - Basic health check
        - `/health/ready` - Readiness probe (templates and content available?)
        """,
        version=__version__,
        lifespan=lifespan,
        license_info={
            "name": "MIT",
        },
    )

    setup_middleware(app, settings)

    register_error_handlers(app)

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    # Health first: the page router ends with a catch-all path
    app.include_router(health_router.router, tags=["health"])
    app.include_router(page_router.router, tags=["pages"])

    return app
