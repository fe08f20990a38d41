# ABOUTME: Shared Click options and output helpers for shelfscan CLI commands.
# ABOUTME: Provides reusable decorators for the API key, threshold, proximity, and --json flags.

import json

import click
from rich.console import Console
from rich.table import Table

from shelfscan.core.resolver import DEFAULT_CONFIDENCE_THRESHOLD
from shelfscan.metadata.types import MatchResult
from shelfscan.vision.clustering import DEFAULT_PROXIMITY_PX

api_key_option = click.option(
    "--api-key",
    envvar="GOOGLE_BOOKS_API_KEY",
    default=None,
    help="Google API key (default: $GOOGLE_BOOKS_API_KEY).",
)

threshold_option = click.option(
    "-t",
    "--threshold",
    type=click.FloatRange(0.0, 1.0),
    default=DEFAULT_CONFIDENCE_THRESHOLD,
    show_default=True,
    help="Minimum confidence for a match (0.0-1.0).",
)

proximity_option = click.option(
    "--proximity",
    type=click.FloatRange(min=0.0),
    default=DEFAULT_PROXIMITY_PX,
    show_default=True,
    help="Max horizontal distance in pixels between fragments of one spine.",
)

json_option = click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print results as JSON instead of a table.",
)


def print_matches(console: Console, matches: list[MatchResult], as_json: bool) -> None:
    """Render match results as a Rich table or a JSON array."""
    if as_json:
        click.echo(json.dumps([m.to_dict() for m in matches], indent=2))
        return

    if not matches:
        console.print("[yellow]No books matched.[/yellow]")
        return

    table = Table()
    table.add_column("Score", justify="right", width=6)
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("ID", style="dim")
    table.add_column("Fragments", style="dim")

    for match in matches:
        table.add_row(
            f"{match.confidence_score:.3f}",
            match.book.title,
            match.book.author or "[dim]unknown[/dim]",
            match.external_id,
            " / ".join(match.matched_fragments),
        )

    console.print(table)
    console.print(f"\n[dim]{len(matches)} book(s) matched[/dim]")
