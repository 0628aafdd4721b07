"""Page routes for serving rendered documentation pages."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from docs_site.config import Settings, get_settings
from docs_site.core.middleware import limiter
from docs_site.dependencies import get_page_renderer
from docs_site.logging_config import get_logger, log_with_context
from docs_site.pages import DEFAULT_PAGE_SLUG, get_page_entry, load_page
from docs_site.views.page_renderer import PageRenderer

logger = get_logger(__name__)

router = APIRouter()


def page_rate_limit() -> str:
    """Rate limit for page requests, read from settings."""
    return get_settings().page_rate_limit


@router.get("/", include_in_schema=False)
async def index():
    """Redirect to the default article."""
    return RedirectResponse(url=f"/{DEFAULT_PAGE_SLUG}.php")


@router.get("/favicon.ico", include_in_schema=False)
async def favicon():
    """Return empty favicon to prevent 404 errors."""
    return Response(content=b"", media_type="image/x-icon")


@router.get("/{page_path:path}", response_class=HTMLResponse)
@limiter.limit(page_rate_limit)
async def page(
    request: Request,
    page_path: str,
    settings: Settings = Depends(get_settings),
    renderer: PageRenderer = Depends(get_page_renderer),
):
    """Render a registered page inside the shared header and footer."""
    entry = get_page_entry(page_path)
    page_data = load_page(entry, settings.content_path)

    log_with_context(
        logger,
        "info",
        "Serving page",
        slug=entry.slug,
        title=entry.title,
        event_type="page_request",
    )
    return renderer.response(page_data)
