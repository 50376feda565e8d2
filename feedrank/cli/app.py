"""Main CLI application."""

import logging

import typer
from dotenv import load_dotenv
from rich.logging import RichHandler

# Load .env file if it exists
load_dotenv()

from .init import init_command
from .rank import explain_command, rank_command

app = typer.Typer(
    name="feedrank",
    help="Feed Rank - personalized feed ranking engine",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Configure logging for all commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


# Register commands
app.command("init")(init_command)
app.command("rank")(rank_command)
app.command("explain")(explain_command)


if __name__ == "__main__":
    app()
