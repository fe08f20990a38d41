# ABOUTME: Core data structures for bibliographic candidates and shelf-scan matches.
# ABOUTME: CandidateBook is a normalized search record; MatchResult adds scan confidence.

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CandidateBook:
    """A normalized bibliographic record returned by a book search provider.

    external_id is the provider's canonical identifier and the key used to
    deduplicate the same book across spine clusters and frames. Providers
    default missing title/authors before building one of these, so scoring
    never sees absent values.
    """

    external_id: str
    title: str
    authors: tuple[str, ...] = ()
    subtitle: str | None = None
    published_date: str | None = None
    page_count: int | None = None
    cover_image_url: str | None = None
    description: str | None = None
    isbn13: str | None = None
    isbn10: str | None = None
    categories: tuple[str, ...] | None = None
    publisher: str | None = None
    average_rating: float | None = None
    language: str | None = None

    @property
    def author(self) -> str:
        """Convenience property: joined author string for display."""
        return ", ".join(self.authors) if self.authors else ""

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase JSON shape used by API consumers."""
        return {
            "externalId": self.external_id,
            "title": self.title,
            "subtitle": self.subtitle,
            "authors": list(self.authors),
            "publishedDate": self.published_date,
            "pageCount": self.page_count,
            "coverImageUrl": self.cover_image_url,
            "description": self.description,
            "isbn13": self.isbn13,
            "isbn10": self.isbn10,
            "categories": list(self.categories) if self.categories is not None else None,
            "publisher": self.publisher,
            "averageRating": self.average_rating,
            "language": self.language,
        }


@dataclass(frozen=True)
class MatchResult:
    """A candidate book accepted for one spine cluster.

    Carries the re-scored confidence and the cluster's OCR texts (top to
    bottom) so a match can be traced back to the fragments that produced it.
    """

    book: CandidateBook
    confidence_score: float
    matched_fragments: tuple[str, ...]

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence_score <= 1.0:
            msg = f"confidence_score must be between 0.0 and 1.0, got {self.confidence_score}"
            raise ValueError(msg)

    @property
    def external_id(self) -> str:
        return self.book.external_id

    def to_dict(self) -> dict[str, Any]:
        data = self.book.to_dict()
        data["confidenceScore"] = self.confidence_score
        data["matchedFragments"] = list(self.matched_fragments)
        return data
