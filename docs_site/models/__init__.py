"""Docs site models"""

from docs_site.models.base_models import DetailedHealthResponse, HealthResponse
from docs_site.models.page import PageEntry, PageMetadata

__all__ = [
    "DetailedHealthResponse",
    "HealthResponse",
    "PageEntry",
    "PageMetadata",
]
