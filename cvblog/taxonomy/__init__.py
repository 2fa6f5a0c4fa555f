"""Category taxonomy and URL builders."""

from .categories import (
    CATEGORIES,
    CATEGORY_BASE_PATH,
    CATEGORY_SLUGS,
    LAYOUT_PRESETS,
    BlogCategory,
    CategoryTable,
    pretty_slug,
)
from .slug import category_slug, normalize_base_path, post_slug_from_id, post_url, to_slug

__all__ = [
    "CATEGORIES",
    "CATEGORY_BASE_PATH",
    "CATEGORY_SLUGS",
    "LAYOUT_PRESETS",
    "BlogCategory",
    "CategoryTable",
    "pretty_slug",
    "category_slug",
    "normalize_base_path",
    "post_slug_from_id",
    "post_url",
    "to_slug",
]
