"""
Listing page paths.

Page 1 always lives at the bare base path; ``/page/1/`` is never emitted, so
the first page has exactly one URL.
"""

import math
from typing import Any, List, Optional

from pydantic import BaseModel, Field

from ..taxonomy import CATEGORY_BASE_PATH, normalize_base_path


class PageLinks(BaseModel):
    """Canonical and prev/next links for one listing page."""

    canonical: str = Field(..., description="Canonical path of this page")
    rel_prev: Optional[str] = Field(None, description="Previous page path, None on page 1")
    rel_next: Optional[str] = Field(None, description="Next page path, None on the last page")


def page_href(base_path: str, page: int) -> str:
    """page 1 -> '{base}/', page N -> '{base}/page/{N}/'."""
    base = normalize_base_path(base_path)
    return f"{base}/" if page <= 1 else f"{base}/page/{page}/"


def make_rel_links(current_page: int, total_pages: int, base_path: str) -> PageLinks:
    """Prev/next/canonical links. The prev link of page 2 is the bare base path."""
    base = normalize_base_path(base_path)

    rel_prev = None
    if current_page > 1:
        rel_prev = f"{base}/" if current_page == 2 else page_href(base, current_page - 1)

    rel_next = page_href(base, current_page + 1) if current_page < total_pages else None

    return PageLinks(canonical=page_href(base, current_page), rel_prev=rel_prev, rel_next=rel_next)


def category_page_path(category: str, page: Any = 1, base_path: str = CATEGORY_BASE_PATH) -> str:
    """Listing path of a category page: /{base}/{category}/ or /{base}/{category}/page/{N}/."""
    base = normalize_base_path(base_path)
    return page_href(f"{base}/{category}", parse_page_param(page))


def pages_array(total_pages: int) -> List[int]:
    """[1, 2, ..., total_pages] for numbered pagination UIs."""
    return list(range(1, max(0, total_pages) + 1))


def parse_page_param(param: Any) -> int:
    """Route page parameter as a positive integer; anything invalid becomes 1."""
    if isinstance(param, bool) or param is None:
        return 1
    if isinstance(param, int):
        return param if param >= 1 else 1

    text = str(param).strip()
    try:
        return max(1, int(text))
    except ValueError:
        pass

    try:
        number = float(text)
    except (ValueError, OverflowError):
        return 1
    if not math.isfinite(number) or number < 1:
        return 1
    return int(math.floor(number))
