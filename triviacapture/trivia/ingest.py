from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

from ..ocr.schema import TextLine

logger = logging.getLogger("triviacapture")

MIN_CONFIDENCE = 70.0

# Overlay text the question card shows on top of the question block.
NOISE_SUBSTRINGS: Sequence[str] = (
    "reveal comments",
    "swipe left to comment",
)


def _is_noise(text: str, noise: Sequence[str]) -> bool:
    low = text.lower()
    return any(n in low for n in noise)


def ingest_lines(
    lines: Iterable[TextLine],
    *,
    min_confidence: float = MIN_CONFIDENCE,
    noise: Sequence[str] = NOISE_SUBSTRINGS,
) -> List[TextLine]:
    """Trim OCR lines and drop UI noise and low-confidence reads, keeping order."""
    out: List[TextLine] = []
    for ln in lines:
        text = (ln.text or "").strip()
        if _is_noise(text, noise):
            logger.debug("dropping noise line %r", text)
            continue
        if ln.conf < min_confidence:
            logger.debug("dropping low-confidence line %r (conf: %.1f)", text, ln.conf)
            continue
        out.append(TextLine(text=text, conf=ln.conf, bbox=ln.bbox))
    return out
