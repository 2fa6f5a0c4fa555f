"""Immutable in-memory collection of article records for one batch run."""

from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from ..exceptions import DuplicateArticleError
from ..models import ArticleRecord


class Corpus:
    """Read-only set of articles keyed by id."""

    def __init__(self, articles: Iterable[ArticleRecord]) -> None:
        by_id: Dict[str, ArticleRecord] = {}
        for article in articles:
            existing = by_id.get(article.id)
            if existing is not None:
                raise DuplicateArticleError(article.id, existing.source_path, article.source_path)
            by_id[article.id] = article
        self._articles: Tuple[ArticleRecord, ...] = tuple(by_id.values())
        self._by_id = by_id

    def __iter__(self) -> Iterator[ArticleRecord]:
        return iter(self._articles)

    def __len__(self) -> int:
        return len(self._articles)

    def __contains__(self, article_id: object) -> bool:
        return article_id in self._by_id

    def get(self, article_id: str) -> Optional[ArticleRecord]:
        return self._by_id.get(article_id)

    def find(self, key: str) -> Optional[ArticleRecord]:
        """Look up by full id, falling back to a unique base name match."""
        article = self.get(key.strip("/"))
        if article is not None:
            return article
        matches = [a for a in self._articles if a.base_name == key.strip("/")]
        return matches[0] if len(matches) == 1 else None

    def published(self) -> List[ArticleRecord]:
        """Non-draft articles, in load order."""
        return [a for a in self._articles if not a.draft]

    def in_category(self, category: str) -> List[ArticleRecord]:
        """Non-draft articles filed under a category."""
        return [a for a in self._articles if not a.draft and a.category == category]

    def categories(self) -> List[str]:
        """Distinct categories of non-draft articles, sorted."""
        return sorted({a.category for a in self._articles if not a.draft})
