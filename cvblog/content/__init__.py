"""Content store: reads articles into an immutable corpus."""

from .corpus import Corpus
from .loader import (
    estimate_reading_minutes,
    find_content_files,
    load_article,
    load_articles,
    load_corpus,
    record_from_frontmatter,
    split_frontmatter,
)

__all__ = [
    "Corpus",
    "estimate_reading_minutes",
    "find_content_files",
    "load_article",
    "load_articles",
    "load_corpus",
    "record_from_frontmatter",
    "split_frontmatter",
]
