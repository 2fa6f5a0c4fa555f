"""Article record model built from a content file's frontmatter and body."""

from datetime import date, datetime, timezone
from typing import Any, FrozenSet, List, Optional

import pendulum
from pydantic import Field, field_validator

from ..taxonomy.slug import to_slug
from .base import RecordModel

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def coerce_datetime(value: Any) -> Optional[datetime]:
    """
    Turn a frontmatter date into a timezone-aware datetime.

    Missing or unparseable values come back as None instead of raising,
    so one bad date never aborts a whole batch.
    """
    if value is None or isinstance(value, bool):
        return None

    try:
        if isinstance(value, datetime):
            if value.tzinfo is None:
                return pendulum.instance(value, tz="UTC")
            return value
        if isinstance(value, date):
            return pendulum.datetime(value.year, value.month, value.day, tz="UTC")
        if isinstance(value, (int, float)):
            return pendulum.from_timestamp(value)
        if isinstance(value, str) and value.strip():
            parsed = pendulum.parse(value.strip(), tz="UTC")
            if isinstance(parsed, datetime):
                return parsed
            if isinstance(parsed, date):
                return pendulum.datetime(parsed.year, parsed.month, parsed.day, tz="UTC")
    except (ValueError, TypeError, OverflowError, OSError):
        return None

    return None


class ManualRelatedPost(RecordModel):
    """Author-supplied related article entry from frontmatter."""

    title: Optional[str] = Field(None, description="Link title")
    href: Optional[str] = Field(None, description="Link target")
    category: Optional[str] = Field(None, description="Category label for the link")
    reading_time_minutes: Optional[int] = Field(None, description="Reading time in minutes")
    excerpt: Optional[str] = Field(None, description="Short description")
    date_iso: Optional[str] = Field(None, description="Publication date as ISO string")

    @field_validator("title", "href", "category", "excerpt", "date_iso", mode="before")
    @classmethod
    def _strings_only(cls, v: Any) -> Optional[str]:
        return v if isinstance(v, str) else None

    @field_validator("reading_time_minutes", mode="before")
    @classmethod
    def _numbers_only(cls, v: Any) -> Optional[int]:
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            return None
        return int(v)


class ArticleRecord(RecordModel):
    """One published or draft blog article."""

    id: str = Field(..., min_length=1, description="Stable slug path, e.g. 'cv-strategy/ats-proof-cv'")
    category: str = Field("", description="Category slug, normalised from the frontmatter value")
    tags: FrozenSet[str] = Field(default_factory=frozenset, description="Free-form tags")
    published_at: Optional[datetime] = Field(None, description="Publication date")
    draft: bool = Field(False, description="Drafts are never listed or suggested")
    title: Optional[str] = Field(None, description="Article title")
    excerpt: Optional[str] = Field(None, description="Short description")
    reading_time_minutes: Optional[int] = Field(None, description="Reading time in minutes")
    manual_related: List[ManualRelatedPost] = Field(
        default_factory=list,
        description="Explicit related articles that replace automatic selection",
    )
    body: str = Field("", description="Raw body text")
    layout_version: Optional[str] = Field(None, description="Layout generation, e.g. 'blog-post-v1'")
    article_type: Optional[str] = Field(None, description="Editorial type (pillar, tactical, faq, ...)")
    layout_preset: Optional[str] = Field(None, description="BlogPostLayout preset")
    key_takeaways: Optional[List[Any]] = Field(None, description="Key takeaways list")
    checklist: Optional[Any] = Field(None, description="Implementation checklist block")
    source_path: Optional[str] = Field(None, description="File the record was read from")

    @field_validator("published_at", mode="before")
    @classmethod
    def _safe_date(cls, v: Any) -> Optional[datetime]:
        return coerce_datetime(v)

    @field_validator("tags", mode="before")
    @classmethod
    def _clean_tags(cls, v: Any) -> FrozenSet[str]:
        if isinstance(v, str):
            return frozenset([v.strip()]) if v.strip() else frozenset()
        if not isinstance(v, (list, tuple, set, frozenset)):
            return frozenset()
        return frozenset(t.strip() for t in v if isinstance(t, str) and t.strip())

    @field_validator("category", mode="before")
    @classmethod
    def _slug_category(cls, v: Any) -> str:
        if not isinstance(v, str) or not v.strip():
            return ""
        return to_slug(v)

    @field_validator("layout_preset", "layout_version", "article_type", mode="before")
    @classmethod
    def _optional_string(cls, v: Any) -> Optional[str]:
        if isinstance(v, str) and v.strip():
            return v.strip()
        return None

    @field_validator("key_takeaways", mode="before")
    @classmethod
    def _list_or_none(cls, v: Any) -> Optional[List[Any]]:
        return list(v) if isinstance(v, (list, tuple)) else None

    @property
    def base_name(self) -> str:
        """Last path segment of the id."""
        return self.id.rstrip("/").split("/")[-1] or self.id

    @property
    def sort_date(self) -> datetime:
        """Publication date for ordering; missing dates sort as the epoch."""
        if self.published_at is None:
            return EPOCH
        if self.published_at.tzinfo is None:
            return self.published_at.replace(tzinfo=timezone.utc)
        return self.published_at
