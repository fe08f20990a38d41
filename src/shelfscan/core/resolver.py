# ABOUTME: Resolves one spine cluster to its best-scoring bibliographic candidate.
# ABOUTME: Searches once per cluster, re-scores every candidate, applies the confidence floor.

import logging

from shelfscan.metadata.provider import BookSearchProvider, SearchOutcome
from shelfscan.metadata.scoring import score_match
from shelfscan.metadata.types import MatchResult

logger = logging.getLogger(__name__)

DEFAULT_CONFIDENCE_THRESHOLD = 0.45
DEFAULT_MAX_RESULTS = 3

# Longest query sent to the search provider; OCR can produce pathological runs.
MAX_QUERY_LENGTH = 100

_MIN_QUERY_LENGTH = 3


class ClusterResolver:
    """Turns a spine cluster's texts into at most one MatchResult.

    Search failures of any kind are logged and treated as "no candidates",
    so resolve() never raises.
    """

    def __init__(
        self,
        provider: BookSearchProvider,
        *,
        max_results: int = DEFAULT_MAX_RESULTS,
        max_query_length: int = MAX_QUERY_LENGTH,
    ) -> None:
        self._provider = provider
        self._max_results = max_results
        self._max_query_length = max_query_length

    def resolve(
        self,
        cluster_texts: list[str] | tuple[str, ...],
        confidence_threshold: float = DEFAULT_CONFIDENCE_THRESHOLD,
    ) -> MatchResult | None:
        """Search for the cluster's text and return the best match above threshold.

        A candidate replaces the running best only when it scores strictly
        higher and at least confidence_threshold, so the first of several
        equally scored candidates wins.
        """
        query = " ".join(cluster_texts).strip()
        if len(query) < _MIN_QUERY_LENGTH:
            return None

        outcome = self._search(query[: self._max_query_length])
        if not outcome.ok:
            logger.debug("No candidates for %r: %s", query, outcome.error)
            return None
        if not outcome.candidates:
            logger.debug("Search returned nothing for %r", query)
            return None

        best_match: MatchResult | None = None
        best_score = 0.0
        for candidate in outcome.candidates:
            score = score_match(query, candidate.title, candidate.authors)
            logger.debug("Scored %r against %r: %.3f", query, candidate.title, score)
            if score > best_score and score >= confidence_threshold:
                best_score = score
                best_match = MatchResult(
                    book=candidate,
                    confidence_score=score,
                    matched_fragments=tuple(cluster_texts),
                )

        return best_match

    def _search(self, query: str) -> SearchOutcome:
        try:
            return self._provider.search(query, max_results=self._max_results)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Search raised for %r: %s", query, exc)
            return SearchOutcome.failure(getattr(self._provider, "name", "provider"), str(exc))
