import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent  # docs-site/
PACKAGE_DIR = Path(__file__).resolve().parent

DEFAULT_INCLUDE_PATH = PACKAGE_DIR / "includes"
DEFAULT_CONTENT_PATH = PACKAGE_DIR / "content"


class Settings(BaseSettings):
    """Application settings with validation.

    Values come from environment variables or the .env file. Every field has
    a default, so the site runs out of the box with the packaged templates
    and content.
    """

    # API server settings
    api_host: str = Field(default="127.0.0.1", min_length=1, description="API server host")
    api_port: int = Field(ge=1, le=65535, default=8000, description="API server port")

    # Page assembly
    include_path: Path = Field(
        default=DEFAULT_INCLUDE_PATH,
        description="Directory holding the shared header.html and footer.html templates",
    )
    content_path: Path = Field(
        default=DEFAULT_CONTENT_PATH,
        description="Directory holding the static page bodies",
    )
    site_name: str = Field(default="QuantEcon", min_length=1, description="Site name shown in header and footer")

    # Security / limits
    trusted_hosts: str = Field(default="*", description="Comma separated list of accepted Host headers")
    page_rate_limit: str = Field(default="120/minute", description="Per-client rate limit for page requests")

    log_level: str = Field(default="INFO", description="Root logging level")

    model_config = SettingsConfigDict(
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("api_host", "site_name", mode="after")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Ensure the value is not empty or whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("value cannot be empty")
        return v

    @field_validator("include_path", "content_path", mode="after")
    @classmethod
    def expand_path(cls, v: Path) -> Path:
        """Expand ~ and make the path absolute.

        Existence is not checked here: a missing include path is reported
        when a page is rendered.
        """
        return v.expanduser().resolve()

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log_level names a standard logging level."""
        v = v.strip().upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL, got {v!r}")
        return v


# Singleton settings instance (cached for performance)
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance for dependency injection.

    Use this with FastAPI's Depends(); tests replace it through
    app.dependency_overrides.

    Example:
        @app.get("/")
        async def route(settings: Settings = Depends(get_settings)):
            return {"host": settings.api_host}
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


def get_trusted_hosts(settings: Settings) -> list[str]:
    """Get trusted host patterns from settings.

    Args:
        settings: Settings instance with trusted hosts configuration

    Returns:
        List of trusted host patterns
    """
    return [host.strip() for host in settings.trusted_hosts.split(",") if host.strip()]
