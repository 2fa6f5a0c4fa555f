"""Related-article ranking and selection."""

from .models import CandidateScore
from .scorers import BaseScorer, CategoryScorer, TagOverlapScorer
from .selector import (
    DEFAULT_RELATED_LIMIT,
    RelatedArticleSelector,
    print_selection_summary,
    select_related,
)

__all__ = [
    "BaseScorer",
    "CandidateScore",
    "CategoryScorer",
    "DEFAULT_RELATED_LIMIT",
    "RelatedArticleSelector",
    "TagOverlapScorer",
    "print_selection_summary",
    "select_related",
]
