"""Related command implementation."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..ranking import RelatedArticleSelector, print_selection_summary
from .common import load_cli_config, load_cli_corpus

console = Console()


def related_command(
    article: str = typer.Argument(..., help="Article id (e.g. cv-strategy/ats-proof-cv) or its last segment"),
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        "-l",
        help="Maximum related articles. Default: build.related_limit from config",
        min=1,
    ),
    explain: bool = typer.Option(False, "--explain", help="Show the scored candidate pool"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to cvblog.yaml"),
) -> None:
    """Show related articles for one post."""
    config = load_cli_config(config_path)
    corpus = load_cli_corpus(config)

    target = corpus.find(article)
    if target is None:
        console.print(f"[red]Article '{escape(article)}' not found.[/red]")
        raise typer.Exit(1)

    if limit is None:
        limit = config.config.build.related_limit

    selector = RelatedArticleSelector(config.category_table())
    related = selector.select(target, corpus, limit)

    if not related:
        console.print("[yellow]No related articles.[/yellow]")
    else:
        source = "manual override" if target.manual_related else "automatic"
        table = Table(title=f"Related to {target.id} ({source})")
        table.add_column("#", style="dim")
        table.add_column("Title", style="cyan")
        table.add_column("Category", style="magenta")
        table.add_column("Date", style="green")
        table.add_column("URL", style="blue")

        for i, item in enumerate(related, 1):
            table.add_row(
                str(i),
                escape(item.title),
                escape(item.category),
                (item.date_iso or "-")[:10],
                escape(item.href),
            )

        console.print(table)

    if explain and not target.manual_related:
        print_selection_summary(target, selector.candidate_pool(target, corpus), limit)
