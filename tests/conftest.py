# ABOUTME: Shared pytest fixtures for shelfscan tests.
# ABOUTME: Provides fragment builders and sample fragment files for a small shelf.

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from shelfscan.vision.types import Bounds, PositionedFragment


def make_fragment(
    text: str, center_x: float, y: float = 0.0, width: float = 40.0, height: float = 20.0
) -> PositionedFragment:
    """Build a fragment whose box is centered horizontally on center_x."""
    return PositionedFragment(
        text=text,
        bounds=Bounds(x=center_x - width / 2, y=y, width=width, height=height),
    )


@pytest.fixture
def fragment() -> Callable[..., PositionedFragment]:
    """Factory fixture for fragments positioned by horizontal center."""
    return make_fragment


@pytest.fixture
def dune_fragments() -> list[PositionedFragment]:
    """Three fragments stacked on one spine: Dune / Frank / Herbert."""
    return [
        PositionedFragment("Dune", Bounds(x=30, y=10, width=40, height=30)),
        PositionedFragment("Frank", Bounds(x=32, y=60, width=40, height=20)),
        PositionedFragment("Herbert", Bounds(x=23, y=110, width=60, height=20)),
    ]


@pytest.fixture
def shelf_fragments() -> list[PositionedFragment]:
    """A three-spine shelf plus one stray single-character fragment.

    Spines from left to right: "The Great Gatsby", "Dune Frank Herbert",
    "Beloved Toni Morrison". The stray "x" sits far to the right.
    """
    return [
        make_fragment("Gatsby", center_x=102, y=200),
        make_fragment("The", center_x=100, y=20),
        make_fragment("Great", center_x=98, y=110),
        make_fragment("Dune", center_x=400, y=30),
        make_fragment("Frank", center_x=402, y=150),
        make_fragment("Herbert", center_x=404, y=220),
        make_fragment("Beloved", center_x=700, y=40),
        make_fragment("Toni", center_x=705, y=140),
        make_fragment("Morrison", center_x=702, y=210),
        make_fragment("x", center_x=1000, y=50),
    ]


@pytest.fixture
def shelf_fragments_file(tmp_path: Path, shelf_fragments: list[PositionedFragment]) -> Path:
    """shelf_fragments written in the extractor's {"fragments": [...]} JSON shape."""
    path = tmp_path / "shelf.json"
    payload = {"fragments": [f.to_dict() for f in shelf_fragments]}
    path.write_text(json.dumps(payload))
    return path
