"""Init command implementation."""

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from ..config import ConfigModel, save_config

console = Console()


def init_command(
    config_dir: Path = typer.Option(
        Path.home() / ".config" / "feedrank",
        "--config-dir",
        "-c",
        help="Configuration directory",
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing config"),
) -> None:
    """Write a default ranking configuration."""
    console.print(Panel.fit("Feed Rank - Initialization", style="bold blue"))

    config_path = config_dir / "config.yaml"
    if config_path.exists() and not force:
        console.print(f"[yellow]Config already exists: {config_path} (use --force to overwrite)[/yellow]")
        raise typer.Exit(1)

    save_config(ConfigModel(), config_path)
    console.print(f"✅ Created config: {config_path}")

    console.print(
        Panel(
            f"[green]✅ Feed Rank initialized successfully![/green]\n\n"
            f"Configuration: {config_path}\n\n"
            f"Next steps:\n"
            f"1. Tune weights under [bold]ranking.weights[/bold]\n"
            f"2. Point at the config: [bold]export FEEDRANK_CONFIG={config_path}[/bold]\n"
            f"3. Run: [bold]feedrank rank snapshot.json[/bold]",
            style="green",
        )
    )
