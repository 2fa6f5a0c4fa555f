"""Slug and article URL builders."""

import re
import unicodedata
from typing import Optional

UNCATEGORIZED = "uncategorized"

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def to_slug(value: Optional[str]) -> str:
    """Normalize any string to a URL-safe slug. Falls back to 'uncategorized'."""
    text = unicodedata.normalize("NFKD", str(value or ""))
    text = "".join(ch for ch in text if not unicodedata.combining(ch))
    text = _NON_ALNUM.sub("-", text.lower().strip()).strip("-")
    return text or UNCATEGORIZED


def category_slug(category: Optional[str]) -> str:
    """Category slug with 'uncategorized' default."""
    return to_slug(category or UNCATEGORIZED)


def post_slug_from_id(article_id: str) -> str:
    """Last path segment of an article id, e.g. 'cv-strategy/foo' -> 'foo'."""
    segment = str(article_id or "").rstrip("/").split("/")[-1].strip()
    if not segment:
        raise ValueError("post_slug_from_id: empty id")
    return segment


def normalize_base_path(base_path: str) -> str:
    """Ensure a leading slash and strip the trailing one."""
    s = base_path.strip()
    if not s.startswith("/"):
        s = "/" + s
    return s.rstrip("/") if s != "/" else ""


def post_url(article_id: str, category: Optional[str], base_path: str = "/blog") -> str:
    """Site-relative article URL: /{base}/{category-slug}/{base-name}/."""
    base = normalize_base_path(base_path)
    return f"{base}/{category_slug(category)}/{post_slug_from_id(article_id)}/"
