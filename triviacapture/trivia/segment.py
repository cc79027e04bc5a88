from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from ..ocr.schema import TextLine
from .errors import SegmentationFailure
from .models import NUM_OPTIONS, Question

logger = logging.getLogger("triviacapture")

GROUPING_THRESHOLD = 60  # px between neighbouring left edges of one column
MAX_X_VALUE = 200        # px; the question column sits near the left margin
MIN_LINES_FOR_SUCCESS = NUM_OPTIONS + 1

_SENTINEL = -10**8


def find_dominant_column(
    lines: Sequence[TextLine],
    *,
    threshold: int = GROUPING_THRESHOLD,
    max_x: int = MAX_X_VALUE,
) -> Tuple[Optional[int], int]:
    """
    Return (representative x1, streak) of the longest left-aligned run.

    Left edges are walked in ascending order. Edges past ``max_x`` are
    skipped without breaking a run. The representative is the edge that
    ended the longest run; ties keep the run reached first. With no eligible
    edge the representative is None.
    """
    last_one = _SENTINEL
    streak = 0
    best: Optional[int] = None
    best_streak = -1

    for x in sorted(ln.x1 for ln in lines):
        if x > max_x:
            continue
        if abs(x - last_one) < threshold:
            streak += 1
        else:
            streak = 0
        last_one = x
        if streak > best_streak:
            best_streak = streak
            best = x

    logger.debug("largest cluster: %s (streak: %d)", best, max(best_streak, 0))
    return best, max(best_streak, 0)


def partition_region(
    lines: Sequence[TextLine],
    column_x: Optional[int],
    *,
    threshold: int = GROUPING_THRESHOLD,
) -> Question:
    """
    Keep the lines inside the vertical band spanned by the aligned column,
    then split them into question text and the trailing options.
    """
    aligned_y = [] if column_x is None else [ln.y1 for ln in lines if abs(ln.x1 - column_x) < threshold]

    kept: List[TextLine] = []
    if aligned_y:
        top, bottom = min(aligned_y), max(aligned_y)
        # Lines off the column but inside the band are wrapped or indented parts of the block.
        kept = [ln for ln in lines if top <= ln.y1 <= bottom]

    for ln in kept:
        logger.debug("kept: %r box%s", ln.text, ln.bbox)

    if len(kept) < MIN_LINES_FOR_SUCCESS:
        raise SegmentationFailure(len(kept), MIN_LINES_FOR_SUCCESS)

    first_option = len(kept) - NUM_OPTIONS
    return Question(
        text=" ".join(ln.text for ln in kept[:first_option]),
        options=[ln.text for ln in kept[first_option:]],
    )


def segment_question(lines: Sequence[TextLine]) -> Question:
    column_x, _streak = find_dominant_column(lines)
    return partition_region(lines, column_x)
