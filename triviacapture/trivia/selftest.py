from __future__ import annotations

import logging
from typing import List

from .negation import detect_negation
from .query import filter_query
from .wordlists import WordLists

logger = logging.getLogger("triviacapture")


DEFAULT_SELFTEST_QUESTIONS: List[str] = [
    "Which of these is NOT a primary color?",
    'Who sang "Don\'t Stop Me Now"?',
    "What year did the Berlin Wall fall?",
    "",
]


def run_wordlist_selftest(words: WordLists, questions: List[str] | None = None) -> None:
    """Smoke-test the loaded word lists so a broken file fails at startup, not mid-run.

    This only verifies that filtering and negation detection do not raise.
    """
    test_questions = questions or DEFAULT_SELFTEST_QUESTIONS
    for q in test_questions:
        filtered = filter_query(q, words.filtered)
        negative = detect_negation(q, words.negative)
        logger.debug("selftest: %r -> %r (negative: %s)", q, filtered, negative)

    logger.info(
        "Word list self-test passed (%d questions, %d filtered words, %d negative words).",
        len(test_questions),
        len(words.filtered),
        len(words.negative),
    )
