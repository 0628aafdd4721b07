"""Main FastAPI application entry point."""

import os
from pathlib import Path

from dotenv import load_dotenv

from docs_site.core.app_factory import create_app
from docs_site.core.middleware import limiter
from docs_site.logging_config import setup_logging

# Load environment variables from .env file
load_dotenv(Path(__file__).parent.parent / ".env")

# Configure structured logging (JSON to file + console)
setup_logging(os.getenv("LOG_LEVEL", "INFO"))

app = create_app()

__all__ = ["app", "limiter"]


def run() -> None:
    """Serve the site with uvicorn."""
    import uvicorn

    from docs_site.config import get_settings

    settings = get_settings()
    uvicorn.run(
        "docs_site.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
