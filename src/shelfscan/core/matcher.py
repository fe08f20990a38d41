# ABOUTME: Matches a shelf photo's OCR fragments to books, end to end.
# ABOUTME: Clusters spines, resolves them in bounded concurrent batches, dedups and ranks.

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from shelfscan.core.resolver import (
    DEFAULT_CONFIDENCE_THRESHOLD,
    DEFAULT_MAX_RESULTS,
    ClusterResolver,
)
from shelfscan.metadata.provider import BookSearchProvider
from shelfscan.metadata.types import MatchResult
from shelfscan.vision.clustering import DEFAULT_PROXIMITY_PX, SpineCluster, cluster_fragments
from shelfscan.vision.types import PositionedFragment

logger = logging.getLogger(__name__)

# Concurrent searches per batch; batches themselves run one after another.
DEFAULT_BATCH_SIZE = 5


def _batched(clusters: list[SpineCluster], size: int) -> Iterable[list[SpineCluster]]:
    for start in range(0, len(clusters), size):
        yield clusters[start : start + size]


class ShelfMatcher:
    """Runs the full fragments -> ranked matches pipeline for one image.

    Clusters are resolved in batches of batch_size. Searches within a batch
    run concurrently; the next batch starts only after every search in the
    current one has finished. Duplicate books are dropped first-seen-wins in
    cluster order (left to right), which keeps the output deterministic for
    a given set of search responses.
    """

    def __init__(
        self,
        provider: BookSearchProvider,
        *,
        batch_size: int = DEFAULT_BATCH_SIZE,
        proximity_px: float = DEFAULT_PROXIMITY_PX,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> None:
        if batch_size < 1:
            raise ValueError(f"batch_size must be at least 1, got {batch_size}")
        self._resolver = ClusterResolver(provider, max_results=max_results)
        self._batch_size = batch_size
        self._proximity_px = proximity_px

    def match(
        self,
        fragments: Iterable[PositionedFragment],
        confidence_threshold: float = DEFAULT_CONFIDENCE_THRESHOLD,
    ) -> list[MatchResult]:
        """Return matched books sorted by confidence, highest first.

        Every returned result has a distinct external_id and a confidence of
        at least confidence_threshold.
        """
        clusters = cluster_fragments(fragments, self._proximity_px)
        if not clusters:
            return []
        logger.debug("Resolving %d spine clusters", len(clusters))

        # Seen ids are scoped to this call; cross-frame merging is ScanSession's job.
        seen_ids: set[str] = set()
        matches: list[MatchResult] = []

        with ThreadPoolExecutor(max_workers=self._batch_size) as executor:
            for batch in _batched(clusters, self._batch_size):
                # map() yields in submission order and waits for the whole batch.
                batch_results = list(
                    executor.map(
                        lambda c: self._resolver.resolve(c.texts, confidence_threshold),
                        batch,
                    )
                )
                for result in batch_results:
                    if result is None:
                        continue
                    if result.external_id in seen_ids:
                        logger.debug(
                            "Dropping duplicate %s from %r",
                            result.external_id,
                            result.matched_fragments,
                        )
                        continue
                    seen_ids.add(result.external_id)
                    matches.append(result)

        matches.sort(key=lambda m: m.confidence_score, reverse=True)
        logger.info("Matched %d of %d spine clusters", len(matches), len(clusters))
        return matches


def match_books_from_fragments(
    fragments: Iterable[PositionedFragment],
    provider: BookSearchProvider,
    confidence_threshold: float = DEFAULT_CONFIDENCE_THRESHOLD,
) -> list[MatchResult]:
    """Identify the books in one shelf photo from its positioned OCR fragments."""
    return ShelfMatcher(provider).match(fragments, confidence_threshold)
