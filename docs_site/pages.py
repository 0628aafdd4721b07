"""Registry of published pages and loading of their static bodies."""

from pathlib import Path

from docs_site.exceptions import ContentUnavailableException, PageNotFoundException
from docs_site.logging_config import get_logger, log_with_context
from docs_site.models.page import PageEntry, PageMetadata

logger = get_logger(__name__)

LEGACY_SUFFIX = ".php"

DEFAULT_PAGE_SLUG = "developers/py/Unit-Testing-in-QuantEcon"

PAGES: dict[str, PageEntry] = {
    entry.slug: entry
    for entry in (
        PageEntry(
            slug=DEFAULT_PAGE_SLUG,
            title="Developers",
            content_file="developers/py/Unit-Testing-in-QuantEcon.html",
        ),
    )
}


def normalize_slug(path: str) -> str:
    """Turn a request path into a registry slug.

    Example:
        "/developers/py/Unit-Testing-in-QuantEcon.php" -> "developers/py/Unit-Testing-in-QuantEcon"
    """
    slug = path.strip("/")
    if slug.endswith(LEGACY_SUFFIX):
        slug = slug[: -len(LEGACY_SUFFIX)]
    return slug


def get_page_entry(path: str) -> PageEntry:
    """Look up the page registered for a request path.

    Raises:
        PageNotFoundException: If no page is registered under the path
    """
    slug = normalize_slug(path)
    entry = PAGES.get(slug)
    if entry is None:
        raise PageNotFoundException(f"No page at /{slug}", details={"slug": slug})
    return entry


def load_page(entry: PageEntry, content_dir: Path) -> PageMetadata:
    """Read a page body from the content directory.

    Args:
        entry: Registry entry of the page
        content_dir: Directory the entry's content_file is relative to

    Returns:
        PageMetadata ready for rendering

    Raises:
        ContentUnavailableException: If the body file is missing
    """
    file_path = Path(content_dir) / entry.content_file

    if not file_path.is_file():
        log_with_context(
            logger,
            "error",
            "Page body not found",
            slug=entry.slug,
            file_path=str(file_path),
            event_type="content_missing",
        )
        raise ContentUnavailableException(
            f"Content for /{entry.slug} is unavailable",
            details={"slug": entry.slug, "content_file": entry.content_file},
        )

    return PageMetadata(title=entry.title, body=file_path.read_text(encoding="utf-8"))
