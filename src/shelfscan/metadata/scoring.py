# ABOUTME: Confidence scoring for spine cluster text against candidate book metadata.
# ABOUTME: Levenshtein-based similarity with a binary author signal and a short-text penalty.

import math
import re

from rapidfuzz.distance import Levenshtein

# Match weights — must sum to 1.0
_WEIGHT_TITLE = 0.7
_WEIGHT_AUTHOR = 0.3

# Author name parts shorter than this are initials or particles, not evidence.
_MIN_AUTHOR_PART_LENGTH = 3

# Cheap pre-filter: author parts this dissimilar to the whole cluster are skipped.
_AUTHOR_GATE_SIMILARITY = 0.3
_AUTHOR_MATCH_SIMILARITY = 0.8

# Short-text penalty: (exclusive upper bound on normalized length, multiplier).
_LENGTH_PENALTIES = ((4, 0.5), (8, 0.8))

_NON_ALNUM_RE = re.compile(r"[^a-z0-9\s]")


def normalize_text(text: str) -> str:
    """Lowercase, drop everything except ASCII letters, digits and whitespace, trim."""
    return _NON_ALNUM_RE.sub("", text.lower()).strip()


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance with unit insertion, deletion and substitution costs.

    Case-sensitive; callers normalize first.
    """
    return Levenshtein.distance(a, b)


def normalized_similarity(a: str, b: str) -> float:
    """Return 1 - edit_distance / longer length, in [0.0, 1.0].

    Two empty strings are identical (1.0).
    """
    if not a and not b:
        return 1.0
    return Levenshtein.normalized_similarity(a, b)


def _author_detected(norm_cluster: str, authors: list[str] | tuple[str, ...]) -> bool:
    """Whether any author name part shows up in the cluster text.

    The > 0.3 similarity gate runs before the substring / > 0.8 check, so a
    part that is literally contained in a long cluster can still be skipped
    when the cluster is much longer than the part.
    """
    for author in authors:
        for part in author.lower().split():
            if len(part) < _MIN_AUTHOR_PART_LENGTH:
                continue
            similarity = normalized_similarity(norm_cluster, part)
            if similarity <= _AUTHOR_GATE_SIMILARITY:
                continue
            if part in norm_cluster or similarity > _AUTHOR_MATCH_SIMILARITY:
                return True
    return False


def _round_half_up(value: float, places: int = 3) -> float:
    factor = 10**places
    return math.floor(value * factor + 0.5) / factor


def score_match(
    cluster_text: str, book_title: str, book_authors: list[str] | tuple[str, ...]
) -> float:
    """Score how well a candidate book explains a spine cluster's OCR text.

    Title similarity carries 0.7 of the weight; author presence is a binary
    0.3 signal. Very short cluster text is penalized (x0.5 under 4 chars,
    x0.8 under 8) to keep near-empty OCR noise from matching. Returns a
    float in [0.0, 1.0] rounded to 3 decimals.
    """
    norm_cluster = normalize_text(cluster_text)
    norm_title = normalize_text(book_title)

    title_score = normalized_similarity(norm_cluster, norm_title)
    author_score = 1.0 if _author_detected(norm_cluster, book_authors) else 0.0

    score = title_score * _WEIGHT_TITLE + author_score * _WEIGHT_AUTHOR

    for max_length, multiplier in _LENGTH_PENALTIES:
        if len(norm_cluster) < max_length:
            score *= multiplier
            break

    return _round_half_up(score)
