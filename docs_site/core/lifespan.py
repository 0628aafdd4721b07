"""Application lifespan management."""

import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from docs_site import __version__
from docs_site.config import get_settings
from docs_site.exceptions import ConfigurationException
from docs_site.logging_config import get_logger, log_with_context
from docs_site.views.page_renderer import PageRenderer

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan - startup and shutdown events.

    Exceptions raised after yield are logged and re-raised.
    """
    app.state.startup_time = time.time()

    settings = get_settings()
    log_with_context(
        logger,
        "info",
        "Starting docs site",
        version=__version__,
        include_path=str(settings.include_path),
        content_path=str(settings.content_path),
        event_type="app_startup",
    )

    # Missing templates only fail page requests; report them early
    try:
        PageRenderer(settings.include_path, site_name=settings.site_name).load_templates()
    except ConfigurationException as e:
        log_with_context(
            logger,
            "warning",
            "Shared templates unavailable at startup",
            error=e.message,
            event_type="templates_unavailable",
        )

    try:
        yield
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Application error during lifespan",
            error=str(e),
            error_type=type(e).__name__,
            event_type="app_error",
        )
        raise
    finally:
        log_with_context(
            logger,
            "info",
            "Shutting down docs site",
            uptime_seconds=int(time.time() - app.state.startup_time),
            event_type="app_shutdown",
        )
