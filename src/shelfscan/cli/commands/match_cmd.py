# ABOUTME: The `shelfscan match` command for identifying books from OCR fragments.
# ABOUTME: Clusters a fragment file into spines and resolves them against Google Books.

import logging
from pathlib import Path

import click
from rich.console import Console

from shelfscan.cli.options import (
    api_key_option,
    json_option,
    print_matches,
    proximity_option,
    threshold_option,
)
from shelfscan.core.matcher import ShelfMatcher
from shelfscan.metadata.googlebooks import GoogleBooksProvider
from shelfscan.metadata.http import HttpClient, ShelfscanHttpClient
from shelfscan.metadata.provider import BookSearchProvider
from shelfscan.vision.fragments_io import FragmentFileError, load_fragments

logger = logging.getLogger(__name__)


def _create_provider(http_client: HttpClient, api_key: str | None) -> BookSearchProvider:
    """Create the default book search provider (Google Books)."""
    return GoogleBooksProvider(http_client=http_client, api_key=api_key)


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@threshold_option
@proximity_option
@api_key_option
@json_option
def match(
    path: Path,
    threshold: float,
    proximity: float,
    api_key: str | None,
    as_json: bool,
) -> None:
    """Match OCR fragments from a JSON file against Google Books."""
    console = Console()

    try:
        fragments = load_fragments(path)
    except FragmentFileError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc

    with ShelfscanHttpClient() as http_client:
        matcher = ShelfMatcher(_create_provider(http_client, api_key), proximity_px=proximity)
        matches = matcher.match(fragments, confidence_threshold=threshold)
    logger.debug("%d fragments produced %d matches", len(fragments), len(matches))

    print_matches(console, matches, as_json)
