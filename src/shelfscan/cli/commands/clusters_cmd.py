# ABOUTME: The `shelfscan clusters` command for viewing spine clusters.
# ABOUTME: Groups a fragment file into spines without calling any search service.

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from shelfscan.cli.options import proximity_option
from shelfscan.vision.clustering import cluster_fragments
from shelfscan.vision.fragments_io import FragmentFileError, load_fragments

console = Console()


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@proximity_option
def clusters(path: Path, proximity: float) -> None:
    """Show how OCR fragments in a JSON file group into book spines."""
    try:
        fragments = load_fragments(path)
    except FragmentFileError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc

    spines = cluster_fragments(fragments, proximity)
    if not spines:
        console.print("[yellow]No spine clusters found.[/yellow]")
        return

    table = Table(title=path.name)
    table.add_column("#", style="dim", width=3)
    table.add_column("Text", style="bold")
    table.add_column("Fragments", justify="right", width=9)

    for index, spine in enumerate(spines, start=1):
        table.add_row(str(index), spine.joined, str(len(spine.texts)))

    console.print(table)
    console.print(f"\n[dim]{len(spines)} cluster(s) from {len(fragments)} fragment(s)[/dim]")
