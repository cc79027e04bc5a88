from __future__ import annotations

import regex as re
from typing import Sequence

from .query import count_quotes


def detect_negation(question: str, markers: Sequence[str]) -> bool:
    """True when a negation marker appears outside quotation marks."""
    low = question.lower()
    for marker in markers:
        rx = re.compile(re.escape(marker.lower()) + r"\b")
        for m in rx.finditer(low):
            if count_quotes(low[: m.start()]) % 2 == 1:
                # inside a quoted span
                continue
            return True
    return False
