"""Main CLI application."""

import typer
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

from .build import build_command
from .categories import categories_app
from .init import init_command
from .paginate import paginate_command
from .related import related_command
from .validate import validate_command

app = typer.Typer(
    name="cvblog",
    help="Blog content tooling - related articles, category pagination and IA validation",
    no_args_is_help=True,
)

# Register commands
app.command("init")(init_command)
app.command("validate")(validate_command)
app.command("related")(related_command)
app.command("paginate")(paginate_command)
app.command("build")(build_command)
app.add_typer(categories_app, name="categories", help="Inspect blog categories")


if __name__ == "__main__":
    app()
