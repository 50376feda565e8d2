"""Rank and explain command implementations."""

import json
from pathlib import Path
from typing import List, Optional, Tuple

import pendulum
import typer
from pydantic import BaseModel, Field
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import Config
from ..models import ContentItem, UserProfile
from ..ranking import FeedRanker, explain_ranking, explanation_texts, print_ranking_summary

console = Console()


class FeedSnapshot(BaseModel):
    """Frozen view of a candidate pool and the requesting viewer."""

    profile: UserProfile = Field(default_factory=UserProfile)
    items: List[ContentItem] = Field(default_factory=list)


def load_snapshot(snapshot_path: Path) -> Tuple[UserProfile, List[ContentItem]]:
    """Load a JSON snapshot of ``{"profile": {...}, "items": [...]}``."""
    if not snapshot_path.exists():
        raise FileNotFoundError(f"Snapshot file not found: {snapshot_path}")

    with open(snapshot_path, encoding="utf-8") as f:
        data = json.load(f)

    snapshot = FeedSnapshot(**data)
    return snapshot.profile, snapshot.items


def _parse_now(now: Optional[str]) -> pendulum.DateTime:
    if now is None:
        return pendulum.now("UTC")
    return pendulum.parse(now)


def rank_command(
    snapshot: Path = typer.Argument(..., help="JSON snapshot with profile and items"),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Config file (default: $FEEDRANK_CONFIG or ~/.config/feedrank/config.yaml)",
    ),
    top: Optional[int] = typer.Option(None, "--top", "-n", help="Number of items to show"),
    now: Optional[str] = typer.Option(None, "--now", help="Rank as of this ISO timestamp"),
    as_json: bool = typer.Option(False, "--json", help="Print the full result as JSON"),
) -> None:
    """Rank a snapshot of candidate items for its viewer."""
    try:
        config = Config(config_path)
        profile, items = load_snapshot(snapshot)

        ranker = FeedRanker(config.ranking)
        result = ranker.rank(items, profile, now=_parse_now(now))
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Ranking failed: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
        return

    display = config.config.display
    print_ranking_summary(
        result,
        top_n=top or display.top_n,
        show_signals=display.show_signals,
    )


def explain_command(
    snapshot: Path = typer.Argument(..., help="JSON snapshot with profile and items"),
    item_id: str = typer.Argument(..., help="Item to explain"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file"),
    now: Optional[str] = typer.Option(None, "--now", help="Rank as of this ISO timestamp"),
) -> None:
    """Explain why an item lands where it does in the viewer's feed."""
    try:
        config = Config(config_path)
        profile, items = load_snapshot(snapshot)
        ranking_time = _parse_now(now)
        result = FeedRanker(config.ranking).rank(items, profile, now=ranking_time)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Explain failed: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    for position, scored in enumerate(result.ranked_items, 1):
        if scored.item.id == item_id:
            break
    else:
        console.print(f"[red]Item not found in snapshot: {escape(item_id)}[/red]")
        raise typer.Exit(1)

    explanation = scored.explanation or explain_ranking(
        scored.item, profile, scored.signals, ranking_time
    )

    table = Table(title=f"{escape(item_id)} - position {position} of {len(result.ranked_items)}")
    table.add_column("Signal", style="cyan")
    table.add_column("Value", justify="right")
    for name, value in scored.signals.model_dump().items():
        table.add_row(name, f"{value:.3f}")
    table.add_row("[bold]score[/bold]", f"[bold]{scored.score:.3f}[/bold]")
    console.print(table)

    if result.cold_start:
        console.print("[yellow]Cold start: personalization signals are not used[/yellow]")

    console.print("\n[bold]Reasons:[/bold]")
    for i, text in enumerate(explanation_texts(explanation)):
        marker = "*" if i == 0 else "-"
        console.print(f"  {marker} {escape(text)}")
