"""Build orchestrator that loads the corpus and writes blog data files."""

import json
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

import pendulum
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.table import Table

from ..config import Config
from ..content import Corpus, load_articles
from ..exceptions import CvblogError
from ..models import ArticleRecord, RelatedArticle
from ..models.base import to_iso
from ..pagination import CategoryPage, category_pages, sort_for_listing
from ..ranking import RelatedArticleSelector
from ..taxonomy import CategoryTable

console = Console()


class BuildStage:
    """One timed step of the build, with the counters it reports."""

    def __init__(self, name: str, description: str) -> None:
        self.name = name
        self.description = description
        self.started: Optional[float] = None
        self.finished: Optional[float] = None
        self.error: Optional[str] = None
        self.stats: Dict[str, int] = {}

    @property
    def ran(self) -> bool:
        return self.started is not None

    @property
    def success(self) -> bool:
        return self.finished is not None and self.error is None

    @property
    def duration(self) -> float:
        if self.started is None or self.finished is None:
            return 0.0
        return self.finished - self.started

    def start(self) -> None:
        self.started = time.perf_counter()

    def finish(self, **stats: int) -> None:
        self.finished = time.perf_counter()
        self.stats.update(stats)

    def fail(self, error: str) -> None:
        """Stop the clock and keep the reason; the stage counts as failed."""
        self.finished = time.perf_counter()
        self.error = error


def article_record_json(article: ArticleRecord, href: str, related: List[RelatedArticle]) -> Dict[str, Any]:
    """Exported shape of one article."""
    return {
        "id": article.id,
        "slug": article.base_name,
        "title": article.title or article.base_name,
        "url": href,
        "category": article.category,
        "date": to_iso(article.published_at) if article.published_at else None,
        "tags": sorted(article.tags),
        "est_read_min": article.reading_time_minutes,
        "related": [r.model_dump() for r in related],
    }


def category_pages_json(pages: List[CategoryPage]) -> Dict[str, Any]:
    """Exported shape of a category's listing pages."""
    first = pages[0]
    return {
        "category": first.category,
        "total_pages": first.page.total_pages,
        "total_items": first.page.total_items,
        "pages": [
            {
                "page": p.page.current_page,
                "canonical": p.links.canonical,
                "rel_prev": p.links.rel_prev,
                "rel_next": p.links.rel_next,
                "items": [a.id for a in p.page.items],
            }
            for p in pages
        ],
    }


def write_json(path: Path, data: Any) -> None:
    """Write data as indented UTF-8 JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.write("\n")


class BuildOrchestrator:
    """Runs the build-time pass over the corpus."""

    def __init__(self, config: Config):
        """Initialize build orchestrator."""
        self.config = config
        self.categories: CategoryTable = config.category_table()
        self.stages = [
            BuildStage("load", "Loading articles"),
            BuildStage("related", "Selecting related articles"),
            BuildStage("paginate", "Paginating category listings"),
            BuildStage("export", "Writing blog data files"),
        ]
        self.total_start_time: Optional[float] = None

    def _listing_categories(self, corpus: Corpus) -> List[str]:
        known = self.categories.slugs
        extra = [c for c in corpus.categories() if c and c not in self.categories]
        return known + extra

    def _save_stage_stats(self, output_dir: Path):
        """Save pipeline stage statistics."""
        stats = {
            "pipeline": {
                "total_duration": time.time() - self.total_start_time if self.total_start_time else 0,
                "completed_at": pendulum.now("UTC").isoformat(),
            },
            "stages": {},
        }

        for stage in self.stages:
            stats["stages"][stage.name] = {
                "duration": stage.duration,
                "success": stage.success,
                "error": stage.error,
                "stats": stage.stats,
            }

        write_json(output_dir / "build_stats.json", stats)

    def _print_summary(self, output_dir: Path):
        """Print build execution summary."""
        successful_stages = sum(1 for s in self.stages if s.success)
        total_duration = time.time() - self.total_start_time if self.total_start_time else 0

        table = Table(title="Build Summary")
        table.add_column("Stage", style="cyan")
        table.add_column("Status", style="bold")
        table.add_column("Duration", style="yellow")
        table.add_column("Details", style="dim")

        for stage in self.stages:
            status = "[green]✓[/green]" if stage.success else "[red]✗[/red]"
            duration = f"{stage.duration:.2f}s" if stage.duration > 0 else "-"

            details = ""
            if stage.success and stage.stats:
                if stage.name == "load":
                    details = f"{stage.stats.get('articles', 0)} articles, {stage.stats.get('skipped', 0)} skipped"
                elif stage.name == "related":
                    details = f"{stage.stats.get('manual', 0)} manual, {stage.stats.get('automatic', 0)} automatic"
                elif stage.name == "paginate":
                    details = f"{stage.stats.get('categories', 0)} categories, {stage.stats.get('pages', 0)} pages"
                elif stage.name == "export":
                    details = f"{stage.stats.get('files', 0)} files"
            elif not stage.success:
                details = escape(stage.error or "Not run")

            table.add_row(stage.name.title(), status, duration, details)

        console.print()
        console.print(table)

        if successful_stages == len(self.stages):
            console.print(Panel(
                f"[green]✅ Build completed successfully![/green]\n\n"
                f"Duration: {total_duration:.2f} seconds\n"
                f"Output directory: {escape(str(output_dir))}",
                style="green",
            ))
        else:
            failed_stages = [s.name for s in self.stages if not s.success]
            console.print(Panel(
                f"[red]❌ Build failed![/red]\n\n"
                f"Failed stages: {', '.join(failed_stages)}\n"
                f"Duration: {total_duration:.2f} seconds",
                style="red",
            ))

    def run(self, output_dir: Optional[Path] = None) -> bool:
        """
        Run the complete build.

        Returns:
            True if every stage completed, False otherwise
        """
        self.total_start_time = time.time()
        output_dir = output_dir or self.config.output_dir
        content_dir = self.config.content_dir

        console.print(Panel.fit(
            f"📝 Blog Data Build\n"
            f"Content: {escape(str(content_dir))} • Per page: {self.config.config.build.per_page} • "
            f"Related: {self.config.config.build.related_limit}",
            style="bold blue",
        ))

        try:
            return self._execute_pipeline(content_dir, output_dir)
        finally:
            if any(s.ran for s in self.stages):
                self._save_stage_stats(output_dir)
            self._print_summary(output_dir)

    def _execute_pipeline(self, content_dir: Path, output_dir: Path) -> bool:
        """Execute the pipeline stages."""
        build = self.config.config.build
        corpus: Optional[Corpus] = None
        related: Dict[str, List[RelatedArticle]] = {}
        listings: Dict[str, List[CategoryPage]] = {}

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            TimeElapsedColumn(),
            console=console,
            transient=True,
        ) as progress:

            # Stage 1: Load the corpus
            stage = self.stages[0]
            task = progress.add_task(stage.description, total=1)
            stage.start()

            try:
                articles, failures = load_articles(content_dir, self.config.config.content.words_per_minute)
                corpus = Corpus(articles)
                stage.finish(
                    articles=len(corpus),
                    drafts=sum(1 for a in corpus if a.draft),
                    skipped=len(failures),
                )
                progress.advance(task, 1)
            except (CvblogError, FileNotFoundError) as e:
                stage.fail(str(e))
                return False

            # Stage 2: Related articles for every published post
            stage = self.stages[1]
            progress.remove_task(task)
            task = progress.add_task(stage.description, total=1)
            stage.start()

            selector = RelatedArticleSelector(self.categories)
            published = corpus.published()
            for article in published:
                related[article.id] = selector.select(article, corpus, build.related_limit)

            stage.finish(
                articles=len(published),
                manual=sum(1 for a in published if a.manual_related),
                automatic=sum(1 for a in published if not a.manual_related),
            )
            progress.advance(task, 1)

            # Stage 3: Category listings
            stage = self.stages[2]
            progress.remove_task(task)
            task = progress.add_task(stage.description, total=1)
            stage.start()

            for category in self._listing_categories(corpus):
                listings[category] = category_pages(corpus, category, build.per_page, self.categories)

            stage.finish(
                categories=len(listings),
                pages=sum(len(pages) for pages in listings.values()),
            )
            progress.advance(task, 1)

            # Stage 4: Export
            stage = self.stages[3]
            progress.remove_task(task)
            task = progress.add_task(stage.description, total=1)
            stage.start()

            try:
                files = self._export(corpus, related, listings, output_dir)
                stage.finish(files=files)
                progress.advance(task, 1)
            except OSError as e:
                stage.fail(str(e))
                return False

        return all(s.success for s in self.stages)

    def _export(
        self,
        corpus: Corpus,
        related: Dict[str, List[RelatedArticle]],
        listings: Dict[str, List[CategoryPage]],
        output_dir: Path,
    ) -> int:
        """Write per-category, all-posts and listing files. Returns the file count."""
        selector = RelatedArticleSelector(self.categories)
        records = {
            article.id: article_record_json(article, selector.href_for(article), related[article.id])
            for article in corpus.published()
        }

        files = 0
        by_category: Dict[str, List[Dict[str, Any]]] = {}
        for article in sort_for_listing(corpus.published()):
            by_category.setdefault(article.category or "general", []).append(records[article.id])

        for category, items in sorted(by_category.items()):
            write_json(output_dir / f"{category}.json", items)
            files += 1

        write_json(output_dir / "_all.json", [records[a.id] for a in sort_for_listing(corpus.published())])
        files += 1

        for category, pages in listings.items():
            write_json(output_dir / "pages" / f"{category}.json", category_pages_json(pages))
            files += 1

        return files
