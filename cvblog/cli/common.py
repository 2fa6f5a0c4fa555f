"""Shared helpers for CLI commands."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..config import Config
from ..content import Corpus, load_articles
from ..exceptions import CvblogError

console = Console()


def load_cli_config(config_path: Optional[Path]) -> Config:
    """Config for a command, exiting with a message when it cannot be loaded."""
    config = Config(config_path)
    try:
        config.config
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]{escape(str(e))}[/red]", soft_wrap=True)
        raise typer.Exit(1)
    return config


def load_cli_corpus(config: Config, content_dir: Optional[Path] = None) -> Corpus:
    """Load the corpus, exiting with a message on a missing dir or duplicate ids."""
    content_dir = content_dir or config.content_dir
    try:
        articles, _ = load_articles(content_dir, config.config.content.words_per_minute)
        return Corpus(articles)
    except (FileNotFoundError, CvblogError) as e:
        console.print(f"[red]{escape(str(e))}[/red]", soft_wrap=True)
        raise typer.Exit(1)
