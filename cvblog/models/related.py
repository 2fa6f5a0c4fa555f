"""Related article view model."""

from typing import Optional

from pydantic import Field

from .base import RecordModel


class RelatedArticle(RecordModel):
    """Link card shown in the related reading block of a post."""

    title: str = Field(..., description="Article title")
    href: str = Field(..., description="Site-relative article URL")
    category: str = Field(..., description="Category slug")
    reading_time_minutes: Optional[int] = Field(None, description="Reading time in minutes")
    excerpt: Optional[str] = Field(None, description="Short description")
    date_iso: Optional[str] = Field(None, description="Publication date as ISO string")
