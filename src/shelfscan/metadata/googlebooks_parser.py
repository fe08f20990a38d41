# ABOUTME: Parsing functions for Google Books API JSON responses.
# ABOUTME: Converts volume resources into CandidateBook instances with safe defaults.

from typing import Any

from shelfscan.metadata.types import CandidateBook

DEFAULT_TITLE = "Untitled"
DEFAULT_AUTHOR = "Unknown Author"


def parse_identifier(identifiers: list[dict[str, Any]], kind: str) -> str | None:
    """Return the first industry identifier of the given type (e.g. ISBN_13)."""
    for entry in identifiers:
        if not isinstance(entry, dict):
            continue
        if entry.get("type") == kind and entry.get("identifier"):
            return str(entry["identifier"])
    return None


def clean_cover_url(url: str | None) -> str | None:
    """Force https and drop the page-curl effect Google adds to thumbnails."""
    if not url or not isinstance(url, str):
        return None
    return url.replace("http://", "https://", 1).replace("&edge=curl", "")


def _optional_str(value: Any) -> str | None:
    if value is None or isinstance(value, (dict, list, bool)):
        return None
    text = str(value).strip()
    return text or None


def _optional_int(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return int(value)


def _optional_float(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _string_tuple(value: Any) -> tuple[str, ...] | None:
    if not isinstance(value, list):
        return None
    return tuple(str(v) for v in value if v)


def parse_volume(item: dict[str, Any]) -> CandidateBook | None:
    """Parse one Google Books volume resource into a CandidateBook.

    Missing titles and authors are defaulted so scoring never receives
    absent values. Returns None for items without an id, since the id is
    the deduplication key.
    """
    volume_id = item.get("id")
    if not volume_id:
        return None

    info = item.get("volumeInfo")
    if not isinstance(info, dict):
        info = {}
    identifiers = info.get("industryIdentifiers")
    if not isinstance(identifiers, list):
        identifiers = []
    image_links = info.get("imageLinks")
    if not isinstance(image_links, dict):
        image_links = {}

    authors = _string_tuple(info.get("authors")) or (DEFAULT_AUTHOR,)

    return CandidateBook(
        external_id=str(volume_id),
        title=_optional_str(info.get("title")) or DEFAULT_TITLE,
        subtitle=_optional_str(info.get("subtitle")),
        authors=authors,
        published_date=_optional_str(info.get("publishedDate")),
        page_count=_optional_int(info.get("pageCount")),
        cover_image_url=clean_cover_url(
            image_links.get("thumbnail") or image_links.get("smallThumbnail")
        ),
        description=_optional_str(info.get("description")),
        isbn13=parse_identifier(identifiers, "ISBN_13"),
        isbn10=parse_identifier(identifiers, "ISBN_10"),
        categories=_string_tuple(info.get("categories")),
        publisher=_optional_str(info.get("publisher")),
        average_rating=_optional_float(info.get("averageRating")),
        language=_optional_str(info.get("language")),
    )


def parse_search_results(data: dict[str, Any]) -> list[CandidateBook]:
    """Parse a Google Books volumes search response into CandidateBooks.

    Raises:
        ValueError: If the payload is not a volumes response.
    """
    if not isinstance(data, dict):
        raise ValueError("search response is not a JSON object")

    items = data.get("items") or []
    if not isinstance(items, list):
        raise ValueError("'items' is not a list")

    results: list[CandidateBook] = []
    for item in items:
        if not isinstance(item, dict):
            continue
        book = parse_volume(item)
        if book is not None:
            results.append(book)
    return results
