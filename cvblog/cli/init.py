"""Init command implementation."""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from ..config import ConfigModel, save_config
from ..config.loader import DEFAULT_CONFIG_NAME

console = Console()


def init_command(
    config_dir: Path = typer.Option(
        Path("."),
        "--config-dir",
        "-d",
        help="Directory to write cvblog.yaml into",
    ),
    content_dir: str = typer.Option(
        "src/content/blog",
        "--content-dir",
        help="Content directory, relative to the config file",
    ),
    output_dir: str = typer.Option(
        "public/blog/_data",
        "--output-dir",
        help="Build output directory, relative to the config file",
    ),
    base_path: str = typer.Option("/blog", "--base-path", help="Base path for blog routes"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing config file"),
) -> None:
    """Write a default cvblog.yaml."""
    console.print(Panel.fit("📝 cvblog - Initialization", style="bold blue"))

    config_path = config_dir / DEFAULT_CONFIG_NAME
    if config_path.exists() and not force:
        console.print(f"[red]Config already exists: {escape(str(config_path))} (use --force)[/red]")
        raise typer.Exit(1)

    config = ConfigModel(
        content={"content_dir": content_dir},
        site={"category_base_path": base_path},
        build={"output_dir": output_dir},
    )

    save_config(config, config_path)
    console.print(f"✅ Created config: {escape(str(config_path))}")

    content_path = config_dir / content_dir
    if not content_path.exists():
        console.print(f"[yellow]Content directory does not exist yet: {escape(str(content_path))}[/yellow]")

    console.print(
        Panel(
            "[green]✅ cvblog initialized![/green]\n\n"
            f"Configuration: {escape(str(config_path))}\n\n"
            "Next steps:\n"
            "1. Check IA structure: [bold]cvblog validate[/bold]\n"
            "2. Build blog data: [bold]cvblog build[/bold]",
            style="green",
        )
    )
