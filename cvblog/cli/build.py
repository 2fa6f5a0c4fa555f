"""Build command implementation."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..pipeline import BuildOrchestrator
from .common import load_cli_config

console = Console()


def build_command(
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Where to write data files. Default: build.output_dir from config",
    ),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to cvblog.yaml"),
) -> None:
    """Compute related articles and listings and write blog data files."""
    config = load_cli_config(config_path)

    try:
        orchestrator = BuildOrchestrator(config)
        success = orchestrator.run(output_dir=output_dir)
    except KeyboardInterrupt:
        console.print("\n[yellow]Build interrupted by user[/yellow]")
        raise typer.Exit(1)

    if not success:
        raise typer.Exit(1)
