# ABOUTME: Groups positioned OCR fragments into per-spine clusters.
# ABOUTME: Chained left-to-right sweep on horizontal centers, then top-to-bottom within a spine.

from collections.abc import Iterable
from dataclasses import dataclass

from shelfscan.vision.types import PositionedFragment

# Calibrated for close-range phone photos of a shelf.
DEFAULT_PROXIMITY_PX = 80

# Clusters whose joined text is shorter than this are single-character noise.
MIN_CLUSTER_TEXT_LENGTH = 3


@dataclass(frozen=True)
class SpineCluster:
    """Fragment texts hypothesized to come from one book spine, top to bottom."""

    texts: tuple[str, ...]

    @property
    def joined(self) -> str:
        return " ".join(self.texts).strip()


def cluster_fragments(
    fragments: Iterable[PositionedFragment], proximity_px: float = DEFAULT_PROXIMITY_PX
) -> list[SpineCluster]:
    """Group fragments into spine clusters ordered left to right.

    Fragments are swept in order of horizontal center. A fragment joins the
    open cluster when its center is within proximity_px of the center of the
    fragment added last, so a cluster may drift sideways along a leaning
    spine. Clusters with fewer than three characters of text are dropped.
    """
    # y and text only break exact ties, so input order never matters.
    ordered = sorted(fragments, key=lambda f: (f.bounds.center_x, f.bounds.y, f.text))
    if not ordered:
        return []

    groups: list[list[PositionedFragment]] = [[ordered[0]]]
    for fragment in ordered[1:]:
        last = groups[-1][-1]
        if abs(fragment.bounds.center_x - last.bounds.center_x) <= proximity_px:
            groups[-1].append(fragment)
        else:
            groups.append([fragment])

    clusters: list[SpineCluster] = []
    for group in groups:
        ordered = sorted(group, key=lambda f: (f.bounds.y, f.bounds.center_x, f.text))
        texts = tuple(f.text for f in ordered)
        cluster = SpineCluster(texts=texts)
        if len(cluster.joined) >= MIN_CLUSTER_TEXT_LENGTH:
            clusters.append(cluster)
    return clusters
