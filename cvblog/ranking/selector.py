"""Related-article selector that combines scoring components."""

from typing import Iterable, List, Optional, Tuple

from rich.console import Console
from rich.markup import escape

from ..models import ArticleRecord, RelatedArticle
from ..models.base import to_iso
from ..taxonomy import CategoryTable, post_url
from .models import CandidateScore
from .scorers import CategoryScorer, TagOverlapScorer

console = Console()

DEFAULT_RELATED_LIMIT = 6


def _sort_key(candidate: CandidateScore) -> Tuple[int, float, str]:
    # score desc, date desc, id asc
    return (-candidate.total_score, -candidate.article.sort_date.timestamp(), candidate.article.id)


def _same_link(a: str, b: str) -> bool:
    return a.strip().rstrip("/") == b.strip().rstrip("/")


class RelatedArticleSelector:
    """Pick related reading for an article from the rest of the corpus."""

    def __init__(self, categories: Optional[CategoryTable] = None) -> None:
        """
        Initialize the selector.

        Args:
            categories: Category lookup for this run; supplies the URL base path
        """
        self.categories = categories if categories is not None else CategoryTable()
        self.category_scorer = CategoryScorer(weight=3)
        self.tag_scorer = TagOverlapScorer(weight_per_tag=2)

    def href_for(self, article: ArticleRecord) -> str:
        """Canonical site-relative URL of an article."""
        return post_url(article.id, article.category, self.categories.base_path)

    def score_candidate(self, candidate: ArticleRecord, target: ArticleRecord) -> CandidateScore:
        """Score a single candidate."""
        category_score = self.category_scorer.score(candidate, target)
        tag_score = self.tag_scorer.score(candidate, target)
        return CandidateScore(
            article=candidate,
            total_score=category_score + tag_score,
            category_score=category_score,
            tag_score=tag_score,
            shared_tags=self.tag_scorer.shared_tags(candidate, target),
        )

    def score_candidates(
        self,
        target: ArticleRecord,
        corpus: Iterable[ArticleRecord],
    ) -> List[CandidateScore]:
        """Score every eligible candidate: not the target itself and not a draft."""
        return [
            self.score_candidate(article, target)
            for article in corpus
            if article.id != target.id and not article.draft
        ]

    def candidate_pool(
        self,
        target: ArticleRecord,
        corpus: Iterable[ArticleRecord],
    ) -> List[CandidateScore]:
        """
        Scored candidates after filtering, in final order.

        With tags on the target, zero-score candidates are noise and dropped.
        If nothing survives, fall back to same-category candidates, then to
        every candidate.
        """
        scored = self.score_candidates(target, corpus)

        pool = [c for c in scored if c.total_score > 0] if target.tags else scored
        if not pool:
            pool = [c for c in scored if c.article.category == target.category]
        if not pool:
            pool = scored

        return sorted(pool, key=_sort_key)

    def manual_overrides(self, target: ArticleRecord) -> List[RelatedArticle]:
        """Normalise the author's relatedPosts, dropping blanks and self-links."""
        self_href = self.href_for(target)
        fallback_title = target.title or target.base_name

        related = []
        for item in target.manual_related:
            href = (item.href or "").strip()
            if not href or _same_link(href, self_href):
                continue

            title = (item.title or "").strip() or fallback_title
            category = (item.category or "").strip() or target.category
            related.append(
                RelatedArticle(
                    title=title,
                    href=href,
                    category=category,
                    reading_time_minutes=item.reading_time_minutes,
                    excerpt=item.excerpt,
                    date_iso=item.date_iso,
                )
            )
        return related

    def to_related(self, article: ArticleRecord) -> RelatedArticle:
        """Map a record to the related-article view."""
        return RelatedArticle(
            title=article.title or article.base_name,
            href=self.href_for(article),
            category=article.category,
            reading_time_minutes=article.reading_time_minutes,
            excerpt=article.excerpt,
            date_iso=to_iso(article.published_at) if article.published_at else None,
        )

    def select(
        self,
        target: ArticleRecord,
        corpus: Iterable[ArticleRecord],
        limit: int = DEFAULT_RELATED_LIMIT,
    ) -> List[RelatedArticle]:
        """
        Related articles for target, at most limit of them.

        A non-empty manual override list always wins, even when every entry
        in it turns out to be a self-link.
        """
        if limit <= 0:
            return []

        if target.manual_related:
            return self.manual_overrides(target)[:limit]

        pool = self.candidate_pool(target, corpus)
        return [self.to_related(c.article) for c in pool[:limit]]


def select_related(
    target: ArticleRecord,
    corpus: Iterable[ArticleRecord],
    limit: int = DEFAULT_RELATED_LIMIT,
    categories: Optional[CategoryTable] = None,
) -> List[RelatedArticle]:
    """Functional entry point for RelatedArticleSelector.select."""
    return RelatedArticleSelector(categories).select(target, corpus, limit)


def print_selection_summary(
    target: ArticleRecord,
    pool: List[CandidateScore],
    limit: int = DEFAULT_RELATED_LIMIT,
) -> None:
    """Print the scored candidate pool for one article."""
    console.print(f"\n[bold]Related for:[/bold] {escape(target.title or target.id)}", soft_wrap=True)
    console.print(f"  Candidates after filtering: {len(pool)}")

    for i, candidate in enumerate(pool[:limit], 1):
        article = candidate.article
        date = article.published_at.date().isoformat() if article.published_at else "no date"
        console.print(f"{i}. [yellow]{escape(article.title or article.id)}[/yellow]", soft_wrap=True)
        console.print(
            f"   Score: {candidate.total_score} - {escape(candidate.reason)}",
            soft_wrap=True,
        )
        console.print(
            f"   Breakdown: C:{candidate.category_score} T:{candidate.tag_score} "
            f"({date}, {escape(article.id)})",
            soft_wrap=True,
        )
