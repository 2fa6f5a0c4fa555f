"""Paginate command implementation."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..pagination import paginate_category
from ..taxonomy import category_slug
from .common import load_cli_config, load_cli_corpus

console = Console()


def paginate_command(
    category: str = typer.Argument(..., help="Category slug"),
    page: str = typer.Option("1", "--page", "-p", help="Page number; out-of-range values are clamped"),
    per_page: Optional[int] = typer.Option(
        None,
        "--per-page",
        help="Articles per page. Default: build.per_page from config",
    ),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to cvblog.yaml"),
) -> None:
    """Show one category listing page with its navigation links."""
    config = load_cli_config(config_path)
    corpus = load_cli_corpus(config)
    categories = config.category_table()

    slug = category_slug(category)
    if slug not in categories and slug not in corpus.categories():
        console.print(f"[yellow]Unknown category '{escape(category)}'.[/yellow]")

    if per_page is None:
        per_page = config.config.build.per_page

    listing = paginate_category(corpus, category, page, per_page, categories)
    result = listing.page

    table = Table(title=f"{escape(categories.pretty_title(slug))} · page {result.current_page} of {result.total_pages}")
    table.add_column("Title", style="cyan")
    table.add_column("Date", style="green")
    table.add_column("Id", style="dim")

    for article in result.items:
        date = article.published_at.date().isoformat() if article.published_at else "-"
        table.add_row(escape(article.title or article.base_name), date, escape(article.id))

    console.print(table)
    console.print(f"  Total articles: {result.total_items}")
    console.print(f"  Canonical: {escape(listing.links.canonical)}", soft_wrap=True)
    console.print(f"  Prev: {escape(listing.links.rel_prev or '-')}", soft_wrap=True)
    console.print(f"  Next: {escape(listing.links.rel_next or '-')}", soft_wrap=True)
