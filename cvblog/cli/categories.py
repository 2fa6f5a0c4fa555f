"""Category listing commands."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..pagination import category_page_path
from .common import load_cli_config

console = Console()
categories_app = typer.Typer(help="Inspect blog categories")


@categories_app.command("list")
def categories_list(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to cvblog.yaml"),
) -> None:
    """List all categories."""
    table_data = load_cli_config(config_path).category_table()

    table = Table(title="Blog Categories")
    table.add_column("Slug", style="cyan")
    table.add_column("Name", style="magenta")
    table.add_column("Preset", style="green")
    table.add_column("Stage", style="yellow")
    table.add_column("Path", style="blue")

    for category in table_data:
        table.add_row(
            category.slug,
            escape(category.name),
            category.default_preset,
            category.default_funnel_stage,
            category_page_path(category.slug, 1, table_data.base_path),
        )

    console.print(table)


@categories_app.command("show")
def categories_show(
    slug: str = typer.Argument(..., help="Category slug"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to cvblog.yaml"),
) -> None:
    """Show metadata for one category."""
    categories = load_cli_config(config_path).category_table()
    category = categories.get(slug)

    if category is None:
        console.print(f"[red]Category '{escape(slug)}' not found.[/red]")
        raise typer.Exit(1)

    related = ", ".join(c.slug for c in categories.related(slug))
    console.print(Panel(
        f"[bold]{escape(category.hero_title)}[/bold]\n"
        f"{escape(category.hero_subtitle)}\n\n"
        f"Title: {escape(categories.build_title(slug))}\n"
        f"Description: {escape(categories.build_description(slug))}\n"
        f"Preset: {category.default_preset} • Stage: {category.default_funnel_stage}\n"
        f"Path: {category_page_path(slug, 1, categories.base_path)}\n"
        f"Related categories: {related}",
        title=escape(category.name),
    ))
