"""Fixed-size pagination for category listings."""

import math
from typing import Any, Generic, Iterable, List, Optional, Sequence, TypeVar

from pydantic import BaseModel, Field

from ..models import ArticleRecord
from ..taxonomy import CategoryTable, category_slug
from .links import PageLinks, category_page_path, make_rel_links

T = TypeVar("T")

PER_PAGE = 8


class PageResult(BaseModel, Generic[T]):
    """One page of a paginated list."""

    items: List[T] = Field(default_factory=list, description="Items on this page")
    current_page: int = Field(..., description="Page number after clamping, 1-based", ge=1)
    total_pages: int = Field(..., description="Number of pages, never less than 1", ge=1)
    total_items: int = Field(..., description="Length of the full list", ge=0)
    has_next_page: bool = Field(..., description="Whether a later page exists")
    has_prev_page: bool = Field(..., description="Whether an earlier page exists")


class CategoryPage(BaseModel):
    """Listing page of a category with its navigation links."""

    category: str = Field(..., description="Category slug")
    page: PageResult = Field(..., description="Articles on this page")
    links: PageLinks = Field(..., description="Canonical and prev/next paths")


def _safe_per_page(per_page: Any) -> int:
    if isinstance(per_page, bool) or not isinstance(per_page, int) or per_page <= 0:
        return PER_PAGE
    return per_page


def _requested_page(page: Any) -> float:
    if isinstance(page, bool) or page is None:
        return 1
    try:
        number = float(page)
    except OverflowError:
        # ints beyond float range
        return math.inf if page > 0 else 1
    except (TypeError, ValueError):
        return 1
    if math.isnan(number) or number < 1:
        return 1
    return number if math.isinf(number) else math.floor(number)


def page_count(total_items: int, per_page: int = PER_PAGE) -> int:
    """Number of pages; an empty list still has one page."""
    return max(1, math.ceil(total_items / _safe_per_page(per_page)))


def paginate(items: Sequence[T], page: Any = 1, per_page: Optional[int] = PER_PAGE) -> PageResult[T]:
    """
    Slice items into the requested page.

    Out-of-range or non-numeric page numbers are clamped into
    [1, total_pages] and a non-positive per_page falls back to PER_PAGE.
    """
    items = list(items)
    size = _safe_per_page(per_page)
    total_items = len(items)
    total_pages = page_count(total_items, size)
    current_page = int(min(_requested_page(page), total_pages))

    start = (current_page - 1) * size
    return PageResult(
        items=items[start:start + size],
        current_page=current_page,
        total_pages=total_pages,
        total_items=total_items,
        has_next_page=current_page < total_pages,
        has_prev_page=current_page > 1,
    )


def sort_for_listing(articles: Iterable[ArticleRecord]) -> List[ArticleRecord]:
    """Newest first; same-date articles by id."""
    return sorted(articles, key=lambda a: (-a.sort_date.timestamp(), a.id))


def paginate_category(
    articles: Iterable[ArticleRecord],
    category: str,
    page: Any = 1,
    per_page: Optional[int] = PER_PAGE,
    categories: Optional[CategoryTable] = None,
) -> CategoryPage:
    """
    Listing page for one category: non-draft articles, newest first.

    The category is matched and linked by its slug, so "CV Strategy" lists
    the same articles as "cv-strategy".
    """
    table = categories if categories is not None else CategoryTable()
    category = category_slug(category)
    listed = sort_for_listing(a for a in articles if not a.draft and a.category == category)
    result = paginate(listed, page, per_page)
    base = category_page_path(category, 1, table.base_path)
    return CategoryPage(
        category=category,
        page=result,
        links=make_rel_links(result.current_page, result.total_pages, base),
    )


def category_pages(
    articles: Iterable[ArticleRecord],
    category: str,
    per_page: Optional[int] = PER_PAGE,
    categories: Optional[CategoryTable] = None,
) -> List[CategoryPage]:
    """Every listing page of a category, in page order."""
    articles = list(articles)
    first = paginate_category(articles, category, 1, per_page, categories)
    pages = [first]
    for number in range(2, first.page.total_pages + 1):
        pages.append(paginate_category(articles, category, number, per_page, categories))
    return pages
