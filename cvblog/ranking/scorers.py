"""Individual scoring components for related-article selection."""

from abc import ABC, abstractmethod
from typing import List

from ..models import ArticleRecord


class BaseScorer(ABC):
    """Base class for scoring components."""

    @abstractmethod
    def score(self, candidate: ArticleRecord, target: ArticleRecord) -> int:
        """
        Score a candidate against the article it may be shown next to.

        Args:
            candidate: Article that may be suggested
            target: Article being rendered

        Returns:
            Non-negative integer score
        """
        pass


class CategoryScorer(BaseScorer):
    """Flat bonus for articles in the same category."""

    def __init__(self, weight: int = 3) -> None:
        self.weight = weight

    def score(self, candidate: ArticleRecord, target: ArticleRecord) -> int:
        return self.weight if candidate.category == target.category else 0


class TagOverlapScorer(BaseScorer):
    """Score per tag shared between candidate and target."""

    def __init__(self, weight_per_tag: int = 2) -> None:
        self.weight_per_tag = weight_per_tag

    def shared_tags(self, candidate: ArticleRecord, target: ArticleRecord) -> List[str]:
        """Tags present on both articles, sorted."""
        return sorted(candidate.tags & target.tags)

    def score(self, candidate: ArticleRecord, target: ArticleRecord) -> int:
        return len(self.shared_tags(candidate, target)) * self.weight_per_tag
