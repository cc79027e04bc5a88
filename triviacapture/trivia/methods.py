from __future__ import annotations

from enum import Enum
from typing import Optional

from .models import SearchDocument


def count_mentions(haystack: str, needle: str) -> int:
    """Non-overlapping, case-insensitive occurrences of needle in haystack."""
    n = needle.strip().lower()
    if not n:
        return 0
    return haystack.lower().count(n)


class ScoringMethod(Enum):
    """
    Query construction + scoring strategies. Every option is searched once
    per method and each method's scores are normalized on their own.
    """

    # The question alone; options compete for mentions in the same results.
    QUESTION = 0
    # The question narrowed by the quoted option.
    QUESTION_AND_OPTION = 1
    # The raw question text plus the option, for when filtering drops context.
    VERBATIM_AND_OPTION = 2

    def build_query(self, filtered_question: str, question: str, option: str) -> str:
        if self is ScoringMethod.QUESTION:
            return filtered_question
        if self is ScoringMethod.QUESTION_AND_OPTION:
            return f'{filtered_question} "{option}"'.strip()
        return f"{question} {option}".strip()

    def score_result(self, payload: Optional[SearchDocument], option: str, filtered_option: str) -> float:
        if payload is None:
            return 0.0
        haystack = payload.text()
        return float(max(count_mentions(haystack, option), count_mentions(haystack, filtered_option)))
