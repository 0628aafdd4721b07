"""Page assembly: shared header, static body, shared footer."""

from functools import lru_cache
from pathlib import Path

from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from jinja2 import Template, TemplateNotFound, TemplateSyntaxError

from docs_site.exceptions import TemplateInvalidException, TemplateUnavailableException
from docs_site.logging_config import get_logger, log_with_context
from docs_site.models.page import PageMetadata

logger = get_logger(__name__)

HEADER_TEMPLATE = "header.html"
FOOTER_TEMPLATE = "footer.html"


@lru_cache(maxsize=16)
def get_templates(include_path: Path) -> Jinja2Templates:
    """Return the template collection for an include path.

    Cached per path; jinja2 reloads templates whose files changed on disk.
    """
    return Jinja2Templates(directory=include_path)


class PageRenderer:
    """Renders pages by wrapping a static body in the shared header and footer.

    The include path is passed in explicitly, so two renderers with different
    include paths can coexist in one process.
    """

    def __init__(self, include_path: Path, site_name: str = "QuantEcon"):
        self.include_path = Path(include_path)
        self.site_name = site_name

    def load_templates(self) -> tuple[Template, Template]:
        """Resolve the header and footer templates.

        Returns:
            (header, footer) templates

        Raises:
            TemplateUnavailableException: If the include path or a template is missing
            TemplateInvalidException: If a template fails to compile
        """
        if not self.include_path.is_dir():
            log_with_context(
                logger,
                "error",
                "Include path is not a directory",
                include_path=str(self.include_path),
                event_type="template_path_missing",
            )
            raise TemplateUnavailableException("Include path is not a directory")

        env = get_templates(self.include_path).env
        try:
            header = env.get_template(HEADER_TEMPLATE)
            footer = env.get_template(FOOTER_TEMPLATE)
        except TemplateNotFound as e:
            log_with_context(
                logger,
                "error",
                "Shared template not found",
                template=e.name,
                include_path=str(self.include_path),
                event_type="template_missing",
            )
            raise TemplateUnavailableException(
                f"Template {e.name} not found",
                details={"template": e.name},
            ) from e
        except TemplateSyntaxError as e:
            log_with_context(
                logger,
                "error",
                "Shared template has a syntax error",
                template=e.name,
                line=e.lineno,
                error=e.message,
                include_path=str(self.include_path),
                event_type="template_invalid",
            )
            raise TemplateInvalidException(
                f"Template {e.name} is invalid",
                details={"template": e.name, "line": e.lineno},
            ) from e

        return header, footer

    def render(self, page: PageMetadata) -> str:
        """Render a complete HTML document for a page.

        Both templates are resolved before anything is rendered, so a missing
        template never yields a partial document.

        Args:
            page: Title and static body of the page

        Returns:
            The full HTML document
        """
        header, footer = self.load_templates()
        context = {"page_title": page.title, "site_name": self.site_name}

        document = "\n".join([header.render(context), page.body, footer.render(context)])

        log_with_context(
            logger,
            "debug",
            "Page rendered",
            page_title=page.title,
            size=len(document),
            event_type="page_rendered",
        )
        return document

    def response(self, page: PageMetadata) -> HTMLResponse:
        """Render a page into an HTMLResponse."""
        return HTMLResponse(content=self.render(page))
