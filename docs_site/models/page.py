"""Page models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PageMetadata(BaseModel):
    """A page ready to render: its title and static HTML body.

    The body is trusted markup and is emitted verbatim.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1, description="Page title bound before the header is rendered")
    body: str = Field(default="", description="Static HTML body")

    @field_validator("title", mode="after")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Ensure title is not empty or whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty")
        return v


class PageEntry(BaseModel):
    """Registry record for a published page."""

    model_config = ConfigDict(frozen=True)

    slug: str = Field(..., min_length=1, description="URL path without leading slash or .php suffix")
    title: str = Field(..., min_length=1)
    content_file: str = Field(..., min_length=1, description="Body file relative to the content directory")
