# ABOUTME: Accumulates shelf-scan matches across the frames of one scanning session.
# ABOUTME: Merges by external_id, keeping the highest-confidence result for each book.

from collections.abc import Iterable

from shelfscan.metadata.types import MatchResult


class ScanSession:
    """Merges per-frame match lists into one running result set.

    The matcher only deduplicates within a single frame; a session keeps one
    entry per book across frames and upgrades it when a later frame matches
    the same book with strictly higher confidence.
    """

    def __init__(self) -> None:
        self._by_id: dict[str, MatchResult] = {}
        self.frames_processed = 0

    def add_frame(self, results: Iterable[MatchResult]) -> list[MatchResult]:
        """Merge one frame's matches; return the entries that were new or improved."""
        self.frames_processed += 1
        changed: list[MatchResult] = []
        for result in results:
            existing = self._by_id.get(result.external_id)
            if existing is None or result.confidence_score > existing.confidence_score:
                self._by_id[result.external_id] = result
                changed.append(result)
        return changed

    def results(self) -> list[MatchResult]:
        """All kept matches, highest confidence first."""
        return sorted(self._by_id.values(), key=lambda m: m.confidence_score, reverse=True)

    def __len__(self) -> int:
        return len(self._by_id)
