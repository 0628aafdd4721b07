"""FastAPI dependencies for dependency injection."""

from fastapi import Depends

from docs_site.config import Settings, get_settings
from docs_site.views.page_renderer import PageRenderer


async def get_page_renderer(settings: Settings = Depends(get_settings)) -> PageRenderer:
    """
    Build a page renderer bound to the configured include path.

    Args:
        settings: Settings instance providing include_path and site_name.

    Returns:
        A PageRenderer for this request.
    """
    return PageRenderer(settings.include_path, site_name=settings.site_name)
