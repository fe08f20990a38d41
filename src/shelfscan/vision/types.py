# ABOUTME: Data structures for positioned OCR text detected in a shelf photo.
# ABOUTME: PositionedFragment pairs raw text with its pixel-space bounding box.

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned box in image pixels, origin top-left, x right and y down."""

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            msg = f"bounds must have non-negative size, got {self.width}x{self.height}"
            raise ValueError(msg)

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2


@dataclass(frozen=True)
class PositionedFragment:
    """One detected token or phrase: raw OCR text plus where it sits."""

    text: str
    bounds: Bounds

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PositionedFragment":
        """Build from the `{text, bounds: {x, y, width, height}}` JSON shape.

        Missing coordinates default to 0 and missing text to "".
        """
        raw = data.get("bounds") or {}
        return cls(
            text=str(data.get("text") or ""),
            bounds=Bounds(
                x=float(raw.get("x") or 0),
                y=float(raw.get("y") or 0),
                width=float(raw.get("width") or 0),
                height=float(raw.get("height") or 0),
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "bounds": {
                "x": self.bounds.x,
                "y": self.bounds.y,
                "width": self.bounds.width,
                "height": self.bounds.height,
            },
        }


@dataclass(frozen=True)
class ExtractionResult:
    """Everything a text extractor found in one image."""

    full_text: str = ""
    fragments: tuple[PositionedFragment, ...] = field(default_factory=tuple)
