# ABOUTME: Text extraction adapters that turn a shelf photo into positioned OCR fragments.
# ABOUTME: GoogleVisionExtractor calls Cloud Vision TEXT_DETECTION through the shared HTTP client.

import base64
import logging
import re
from typing import Any, Protocol, runtime_checkable

from shelfscan.metadata.http import HttpClient, MetadataFetchError
from shelfscan.vision.types import Bounds, ExtractionResult, PositionedFragment

logger = logging.getLogger(__name__)

_VISION_ANNOTATE_URL = "https://vision.googleapis.com/v1/images:annotate"
_MAX_ANNOTATIONS = 50

_DATA_URL_PREFIX_RE = re.compile(r"^data:image/[a-zA-Z]+;base64,")


class TextExtractionError(Exception):
    """Raised when an image cannot be converted into text fragments."""


@runtime_checkable
class TextExtractor(Protocol):
    """Protocol for OCR services that locate text in an image."""

    def extract(self, image: bytes | str) -> ExtractionResult: ...


def encode_image(image: bytes | str) -> str:
    """Return base64 image content, stripping a `data:image/...;base64,` prefix."""
    if isinstance(image, bytes):
        return base64.b64encode(image).decode("ascii")
    return _DATA_URL_PREFIX_RE.sub("", image)


def _annotation_to_fragment(annotation: dict[str, Any]) -> PositionedFragment:
    """Collapse a bounding polygon into its axis-aligned box."""
    vertices = (annotation.get("boundingPoly") or {}).get("vertices") or []
    xs = [v.get("x") or 0 for v in vertices] or [0]
    ys = [v.get("y") or 0 for v in vertices] or [0]
    min_x, min_y = min(xs), min(ys)
    return PositionedFragment(
        text=annotation.get("description") or "",
        bounds=Bounds(
            x=float(min_x),
            y=float(min_y),
            width=float(max(xs) - min_x),
            height=float(max(ys) - min_y),
        ),
    )


def parse_annotate_response(data: dict[str, Any]) -> ExtractionResult:
    """Parse a Vision images:annotate response.

    The first text annotation is the whole detected text; each later one is
    a single word or phrase with its own polygon.
    """
    responses = data.get("responses") or [{}]
    annotations = responses[0].get("textAnnotations") or []
    if not annotations:
        return ExtractionResult()

    return ExtractionResult(
        full_text=annotations[0].get("description") or "",
        fragments=tuple(_annotation_to_fragment(a) for a in annotations[1:]),
    )


class GoogleVisionExtractor:
    """Text extractor backed by Google Cloud Vision TEXT_DETECTION."""

    def __init__(self, http_client: HttpClient, api_key: str) -> None:
        if not api_key:
            raise TextExtractionError("A Google API key is required for Cloud Vision")
        self._http = http_client
        self._api_key = api_key

    def extract(self, image: bytes | str) -> ExtractionResult:
        """Detect text in an image given as raw bytes or base64 (data URL allowed).

        Raises:
            TextExtractionError: If the Vision request fails or returns an error.
        """
        payload = {
            "requests": [
                {
                    "image": {"content": encode_image(image)},
                    "features": [{"type": "TEXT_DETECTION", "maxResults": _MAX_ANNOTATIONS}],
                }
            ]
        }
        try:
            data = self._http.post(_VISION_ANNOTATE_URL, payload, params={"key": self._api_key})
        except MetadataFetchError as exc:
            logger.warning("Cloud Vision request failed: %s", exc)
            raise TextExtractionError(f"Cloud Vision API error: {exc}") from exc

        first = (data.get("responses") or [{}])[0]
        if "error" in first:
            message = first["error"].get("message", "unknown error")
            raise TextExtractionError(f"Cloud Vision API error: {message}")

        result = parse_annotate_response(data)
        logger.debug("Cloud Vision found %d fragments", len(result.fragments))
        return result
