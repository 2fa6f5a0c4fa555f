"""Validate command implementation."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..content import load_articles
from ..validation import PREFIX, print_report, validate_corpus
from .common import load_cli_config

console = Console()


def validate_command(
    content_dir: Optional[Path] = typer.Argument(
        None,
        help="Content directory to scan. Default: content.content_dir from config",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to cvblog.yaml",
    ),
) -> None:
    """Check IA structure of core articles. Exits 1 if any error is found."""
    config = load_cli_config(config_path)
    content_dir = content_dir or config.content_dir

    if not content_dir.is_dir():
        console.print(
            f"[red]{escape(PREFIX)} Content directory not found: {escape(str(content_dir))}[/red]",
            soft_wrap=True,
        )
        raise typer.Exit(1)

    articles, failures = load_articles(content_dir, config.config.content.words_per_minute)
    if not articles and not failures:
        console.print(f"{escape(PREFIX)} No MDX files found under {escape(str(content_dir))}.", soft_wrap=True)
        return

    report = validate_corpus(articles)
    print_report(report)

    # Unparseable files cannot be checked, so they block like errors
    if failures:
        console.print(
            f"[red]{escape(PREFIX)} {len(failures)} file(s) could not be parsed.[/red]",
            soft_wrap=True,
        )

    if report.has_errors or failures:
        raise typer.Exit(1)
