# ABOUTME: Unit tests for CandidateBook, MatchResult, and fragment records.
# ABOUTME: Validates construction, validation, and JSON-shaped serialization.

import pytest

from shelfscan.metadata import CandidateBook, MatchResult
from shelfscan.vision.types import Bounds, PositionedFragment


class TestCandidateBook:
    """Tests for the CandidateBook dataclass."""

    def test_minimal_construction(self) -> None:
        """A CandidateBook needs only an id and a title."""
        book = CandidateBook(external_id="abc", title="Dune")
        assert book.authors == ()
        assert book.author == ""
        assert book.isbn13 is None
        assert book.categories is None

    def test_author_joins_names(self) -> None:
        book = CandidateBook(
            external_id="abc", title="Good Omens", authors=("Terry Pratchett", "Neil Gaiman")
        )
        assert book.author == "Terry Pratchett, Neil Gaiman"

    def test_is_immutable(self) -> None:
        """Candidate records cannot be modified after creation."""
        book = CandidateBook(external_id="abc", title="Dune")
        with pytest.raises(AttributeError):
            book.title = "Other"  # type: ignore[misc]

    def test_to_dict_uses_camel_case(self) -> None:
        book = CandidateBook(
            external_id="abc",
            title="Dune",
            authors=("Frank Herbert",),
            page_count=896,
            categories=("Fiction",),
        )
        data = book.to_dict()
        assert data["externalId"] == "abc"
        assert data["authors"] == ["Frank Herbert"]
        assert data["pageCount"] == 896
        assert data["categories"] == ["Fiction"]
        assert data["coverImageUrl"] is None


class TestMatchResult:
    """Tests for the MatchResult dataclass."""

    def test_valid_construction(self) -> None:
        book = CandidateBook(external_id="dune1", title="Dune")
        result = MatchResult(book=book, confidence_score=0.456, matched_fragments=("Dune",))
        assert result.external_id == "dune1"

    def test_confidence_above_one_raises(self) -> None:
        book = CandidateBook(external_id="dune1", title="Dune")
        with pytest.raises(ValueError, match="confidence_score"):
            MatchResult(book=book, confidence_score=1.5, matched_fragments=())

    def test_negative_confidence_raises(self) -> None:
        book = CandidateBook(external_id="dune1", title="Dune")
        with pytest.raises(ValueError, match="confidence_score"):
            MatchResult(book=book, confidence_score=-0.1, matched_fragments=())

    def test_to_dict_flattens_book(self) -> None:
        book = CandidateBook(external_id="dune1", title="Dune", authors=("Frank Herbert",))
        result = MatchResult(
            book=book, confidence_score=0.456, matched_fragments=("Dune", "Frank", "Herbert")
        )
        data = result.to_dict()
        assert data["externalId"] == "dune1"
        assert data["title"] == "Dune"
        assert data["confidenceScore"] == 0.456
        assert data["matchedFragments"] == ["Dune", "Frank", "Herbert"]


class TestPositionedFragment:
    """Tests for fragment and bounds records."""

    def test_center_x(self) -> None:
        assert Bounds(x=30, y=0, width=40, height=10).center_x == 50

    def test_negative_width_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            Bounds(x=0, y=0, width=-1, height=10)

    def test_from_dict_defaults_missing_fields(self) -> None:
        """Missing coordinates default to zero and missing text to empty."""
        fragment = PositionedFragment.from_dict({"bounds": {"x": 5}})
        assert fragment.text == ""
        assert fragment.bounds == Bounds(x=5, y=0, width=0, height=0)

    def test_from_dict_full(self) -> None:
        fragment = PositionedFragment.from_dict(
            {"text": "Dune", "bounds": {"x": 30, "y": 10, "width": 40, "height": 30}}
        )
        assert fragment == PositionedFragment("Dune", Bounds(30, 10, 40, 30))
