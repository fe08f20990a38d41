# ABOUTME: Vision package: positioned OCR fragments, spine clustering, and text extraction.
# ABOUTME: Exports the fragment types and the spine clusterer used by the matcher.

from shelfscan.vision.clustering import DEFAULT_PROXIMITY_PX, SpineCluster, cluster_fragments
from shelfscan.vision.types import Bounds, ExtractionResult, PositionedFragment

__all__ = [
    "DEFAULT_PROXIMITY_PX",
    "Bounds",
    "ExtractionResult",
    "PositionedFragment",
    "SpineCluster",
    "cluster_fragments",
]
