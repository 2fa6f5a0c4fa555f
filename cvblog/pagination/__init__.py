"""Category listing pagination."""

from .links import (
    PageLinks,
    category_page_path,
    make_rel_links,
    page_href,
    pages_array,
    parse_page_param,
)
from .paginator import (
    PER_PAGE,
    CategoryPage,
    PageResult,
    category_pages,
    page_count,
    paginate,
    paginate_category,
    sort_for_listing,
)

__all__ = [
    "PER_PAGE",
    "CategoryPage",
    "PageLinks",
    "PageResult",
    "category_page_path",
    "category_pages",
    "make_rel_links",
    "page_count",
    "page_href",
    "pages_array",
    "paginate",
    "paginate_category",
    "parse_page_param",
    "sort_for_listing",
]
