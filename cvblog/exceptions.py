"""Exceptions raised by cvblog."""

from pathlib import Path
from typing import Optional


class CvblogError(Exception):
    """Base class for all cvblog errors."""


class ContentLoadError(CvblogError):
    """A content file could not be read or its frontmatter could not be parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class DuplicateArticleError(CvblogError):
    """Two records in one corpus share the same id."""

    def __init__(self, article_id: str, first: Optional[str] = None, second: Optional[str] = None) -> None:
        self.article_id = article_id
        self.first = first
        self.second = second
        locations = ""
        if first and second:
            locations = f" ({first}, {second})"
        super().__init__(f"Duplicate article id '{article_id}'{locations}")
