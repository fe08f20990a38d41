# ABOUTME: Reading and writing positioned fragment lists as JSON files.
# ABOUTME: Accepts either {"fragments": [...]} (extractor output) or a bare list.

import json
from pathlib import Path
from typing import Any

from shelfscan.vision.types import PositionedFragment


class FragmentFileError(Exception):
    """Raised when a fragment file cannot be read or has the wrong shape."""


def parse_fragments(data: Any) -> list[PositionedFragment]:
    """Convert decoded JSON into fragments."""
    if isinstance(data, dict):
        data = data.get("fragments")
    if not isinstance(data, list):
        raise FragmentFileError("expected a list of fragments or an object with 'fragments'")

    fragments: list[PositionedFragment] = []
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise FragmentFileError(f"fragment {index} is not an object")
        try:
            fragments.append(PositionedFragment.from_dict(entry))
        except (TypeError, ValueError) as exc:
            raise FragmentFileError(f"fragment {index}: {exc}") from exc
    return fragments


def load_fragments(path: Path) -> list[PositionedFragment]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise FragmentFileError(f"Cannot read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise FragmentFileError(f"Invalid JSON in {path}: {exc}") from exc
    return parse_fragments(data)


def dump_fragments(fragments: list[PositionedFragment], path: Path) -> None:
    payload = {"fragments": [f.to_dict() for f in fragments]}
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
