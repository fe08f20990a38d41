# ABOUTME: The `shelfscan scan` command for identifying books in shelf photos.
# ABOUTME: Runs OCR on each image, matches its spines, and merges matches across images.

from pathlib import Path

import click
from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
)

from shelfscan.cli.options import (
    api_key_option,
    json_option,
    print_matches,
    proximity_option,
    threshold_option,
)
from shelfscan.core.matcher import ShelfMatcher
from shelfscan.core.session import ScanSession
from shelfscan.metadata.googlebooks import GoogleBooksProvider
from shelfscan.metadata.http import HttpClient, ShelfscanHttpClient
from shelfscan.metadata.provider import BookSearchProvider
from shelfscan.vision.extractor import GoogleVisionExtractor, TextExtractionError, TextExtractor


def _create_services(
    http_client: HttpClient, api_key: str
) -> tuple[TextExtractor, BookSearchProvider]:
    """Create the default extractor and provider on a shared HTTP client."""
    extractor = GoogleVisionExtractor(http_client=http_client, api_key=api_key)
    provider = GoogleBooksProvider(http_client=http_client, api_key=api_key)
    return extractor, provider


def _make_progress(console: Console) -> Progress:
    """Create a Rich progress bar for multi-image scans."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[bold]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        console=console,
        transient=True,
    )


@click.command()
@click.argument(
    "images",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@threshold_option
@proximity_option
@api_key_option
@json_option
def scan(
    images: tuple[Path, ...],
    threshold: float,
    proximity: float,
    api_key: str | None,
    as_json: bool,
) -> None:
    """Identify books in one or more shelf photos.

    Each image is treated as one frame of a scanning session: a book seen in
    several images is reported once, with its best confidence.
    """
    console = Console(stderr=as_json)

    if not api_key:
        console.print(
            "[red]Error:[/red] an API key is required (--api-key or GOOGLE_BOOKS_API_KEY)"
        )
        raise SystemExit(1)

    session = ScanSession()
    failures = 0

    with ShelfscanHttpClient() as http_client:
        extractor, provider = _create_services(http_client, api_key)
        matcher = ShelfMatcher(provider, proximity_px=proximity)

        with _make_progress(console) as progress:
            task_id = progress.add_task("Scanning", total=len(images))
            for image_path in images:
                progress.update(task_id, description=image_path.name)
                try:
                    extraction = extractor.extract(image_path.read_bytes())
                except (OSError, TextExtractionError) as exc:
                    progress.console.print(f"  [red]{image_path.name}:[/red] {exc}")
                    failures += 1
                    progress.advance(task_id)
                    continue

                matches = matcher.match(extraction.fragments, confidence_threshold=threshold)
                for result in session.add_frame(matches):
                    progress.console.print(
                        f"  [green]{image_path.name}:[/green] {result.book.title} "
                        f"[dim]({result.confidence_score:.3f})[/dim]"
                    )
                progress.advance(task_id)

    print_matches(console, session.results(), as_json)

    if failures == len(images):
        raise SystemExit(1)
