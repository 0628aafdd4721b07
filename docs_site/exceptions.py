"""Custom exceptions for the docs site with proper HTTP status codes."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error responses."""

    # Generic errors
    DOCS_SITE_ERROR = "DOCS_SITE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Page errors
    PAGE_NOT_FOUND = "PAGE_NOT_FOUND"
    CONTENT_MISSING = "CONTENT_MISSING"

    # Template errors
    TEMPLATE_MISSING = "TEMPLATE_MISSING"
    TEMPLATE_INVALID = "TEMPLATE_INVALID"

    # Configuration errors
    CONFIG_ERROR = "CONFIG_ERROR"


class DocsSiteException(Exception):
    """Base exception for docs site errors with HTTP status code support.

    All custom exceptions should inherit from this class to ensure
    consistent error handling across the application.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.DOCS_SITE_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize docs site exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class PageNotFoundException(DocsSiteException):
    """No page is registered under the requested path."""

    def __init__(self, message: str = "Page not found", details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.PAGE_NOT_FOUND,
            status_code=404,
            details=details,
        )


class ContentUnavailableException(DocsSiteException):
    """A registered page has no body content on disk."""

    def __init__(self, message: str = "Page content is unavailable", details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.CONTENT_MISSING,
            status_code=500,
            details=details,
        )


class ConfigurationException(DocsSiteException):
    """Configuration errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class TemplateUnavailableException(ConfigurationException):
    """A shared template is missing from the include path."""

    def __init__(self, message: str = "Shared template is unavailable", details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.TEMPLATE_MISSING,
            status_code=500,
            details=details,
        )


class TemplateInvalidException(ConfigurationException):
    """A shared template exists but cannot be compiled."""

    def __init__(self, message: str = "Shared template is invalid", details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.TEMPLATE_INVALID,
            status_code=500,
            details=details,
        )
