# ABOUTME: Metadata package for bibliographic search, candidate records, and match scoring.
# ABOUTME: Exports the CandidateBook/MatchResult records and the search provider contract.

from shelfscan.metadata.provider import BookSearchProvider, ProviderError, SearchOutcome
from shelfscan.metadata.scoring import normalized_similarity, score_match
from shelfscan.metadata.types import CandidateBook, MatchResult

__all__ = [
    "BookSearchProvider",
    "CandidateBook",
    "MatchResult",
    "ProviderError",
    "SearchOutcome",
    "normalized_similarity",
    "score_match",
]
