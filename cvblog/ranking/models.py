"""Ranking models."""

from typing import List

from pydantic import BaseModel, Field

from ..models import ArticleRecord


class CandidateScore(BaseModel):
    """Related-article candidate with its score breakdown."""

    article: ArticleRecord = Field(..., description="Candidate article")
    total_score: int = Field(..., description="Combined score", ge=0)
    category_score: int = Field(0, description="Same-category bonus", ge=0)
    tag_score: int = Field(0, description="Shared-tag score", ge=0)
    shared_tags: List[str] = Field(default_factory=list, description="Tags shared with the target, sorted")

    @property
    def article_id(self) -> str:
        return self.article.id

    @property
    def reason(self) -> str:
        """Human-readable scoring reason."""
        reasons = []
        if self.category_score:
            reasons.append("same category")
        if self.shared_tags:
            reasons.append("shared tags: " + ", ".join(self.shared_tags))
        if not reasons:
            reasons.append("no overlap")
        return "; ".join(reasons)
