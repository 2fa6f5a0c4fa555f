"""Data models for cvblog."""

from .article import ArticleRecord, ManualRelatedPost, coerce_datetime
from .related import RelatedArticle
from .validation import Heading, Issue, Severity, ValidationReport

__all__ = [
    "ArticleRecord",
    "ManualRelatedPost",
    "RelatedArticle",
    "Heading",
    "Issue",
    "Severity",
    "ValidationReport",
    "coerce_datetime",
]
