# ABOUTME: Unit tests for the spine clusterer.
# ABOUTME: Covers the proximity boundary, chained drift, vertical ordering, and noise filtering.

from shelfscan.vision.clustering import SpineCluster, cluster_fragments
from shelfscan.vision.types import Bounds, PositionedFragment


def _frag(text: str, center_x: float, y: float = 0.0, width: float = 40.0) -> PositionedFragment:
    return PositionedFragment(
        text=text, bounds=Bounds(x=center_x - width / 2, y=y, width=width, height=20)
    )


class TestClusterFragments:
    """Tests for cluster_fragments."""

    def test_empty_input(self) -> None:
        """No fragments means no clusters."""
        assert cluster_fragments([]) == []

    def test_centers_at_exact_proximity_join(self) -> None:
        """Centers exactly proximity_px apart land in the same cluster."""
        result = cluster_fragments([_frag("Alpha", 100, y=0), _frag("Beta", 180, y=50)])
        assert result == [SpineCluster(texts=("Alpha", "Beta"))]

    def test_centers_past_proximity_split(self) -> None:
        """Centers one pixel beyond proximity_px start a new cluster."""
        result = cluster_fragments([_frag("Alpha", 100), _frag("Beta", 181)])
        assert result == [SpineCluster(texts=("Alpha",)), SpineCluster(texts=("Beta",))]

    def test_custom_proximity(self) -> None:
        """proximity_px is honoured when overridden."""
        fragments = [_frag("Alpha", 100), _frag("Beta", 130)]
        assert len(cluster_fragments(fragments, proximity_px=20)) == 2
        assert len(cluster_fragments(fragments, proximity_px=30)) == 1

    def test_width_does_not_change_center(self) -> None:
        """Fragments of different widths group by center, not left edge."""
        narrow = PositionedFragment("Alpha", Bounds(x=90, y=0, width=20, height=10))
        wide = PositionedFragment("Beta", Bounds(x=0, y=40, width=200, height=10))
        assert cluster_fragments([narrow, wide]) == [SpineCluster(texts=("Alpha", "Beta"))]

    def test_chained_threshold_allows_drift(self) -> None:
        """Each neighbour within range keeps the cluster open, even as it drifts."""
        fragments = [
            _frag("one", 0, y=0),
            _frag("two", 70, y=10),
            _frag("three", 140, y=20),
            _frag("four", 210, y=30),
        ]
        assert cluster_fragments(fragments) == [
            SpineCluster(texts=("one", "two", "three", "four"))
        ]

    def test_texts_ordered_top_to_bottom(self) -> None:
        """Within a spine, texts are read in ascending y."""
        fragments = [
            _frag("Herbert", 53, y=300),
            _frag("Dune", 50, y=100),
            _frag("Frank", 52, y=200),
        ]
        assert cluster_fragments(fragments)[0].texts == ("Dune", "Frank", "Herbert")

    def test_clusters_ordered_left_to_right(self) -> None:
        """Clusters come back in horizontal order."""
        fragments = [_frag("Right", 600), _frag("Left", 100), _frag("Middle", 350)]
        result = cluster_fragments(fragments)
        assert [c.joined for c in result] == ["Left", "Middle", "Right"]

    def test_two_character_cluster_dropped(self) -> None:
        """A spine whose text is only two characters is noise."""
        assert cluster_fragments([_frag("IT", 100)]) == []

    def test_three_character_cluster_kept(self) -> None:
        """Three characters is enough text to keep."""
        assert cluster_fragments([_frag("Dun", 100)]) == [SpineCluster(texts=("Dun",))]

    def test_whitespace_does_not_count_toward_length(self) -> None:
        """Length is measured on the trimmed, space-joined text."""
        assert cluster_fragments([_frag("  a ", 100)]) == []

    def test_stray_fragment_dropped(self, shelf_fragments: list[PositionedFragment]) -> None:
        """A lone single-character fragment far from the shelf is filtered out."""
        result = cluster_fragments(shelf_fragments)
        assert [c.joined for c in result] == [
            "The Great Gatsby",
            "Dune Frank Herbert",
            "Beloved Toni Morrison",
        ]

    def test_input_order_does_not_matter(
        self, shelf_fragments: list[PositionedFragment]
    ) -> None:
        """Clustering is deterministic regardless of the order fragments arrive in."""
        forward = cluster_fragments(shelf_fragments)
        backward = cluster_fragments(list(reversed(shelf_fragments)))
        shuffled = cluster_fragments(shelf_fragments[1::2] + shelf_fragments[::2])
        assert forward == backward == shuffled


class TestSpineCluster:
    """Tests for the SpineCluster record."""

    def test_joined_text(self) -> None:
        cluster = SpineCluster(texts=("The", "Great", "Gatsby"))
        assert cluster.joined == "The Great Gatsby"
