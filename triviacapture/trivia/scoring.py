from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, List, Sequence

from .methods import ScoringMethod
from .models import Question, ScoreEntry, SearchOutcome
from .query import filter_query

logger = logging.getLogger("triviacapture")

# A method whose hits add up to no more than this found nothing worth scaling.
SCALE_EPSILON = 0.5
SCALE_TARGET = 100.0


def raw_scores(outcomes: Sequence[SearchOutcome], stop_words: Sequence[str]) -> List[ScoreEntry]:
    entries: List[ScoreEntry] = []
    for out in outcomes:
        filtered_option = filter_query(out.target_option, stop_words)
        entries.append(
            ScoreEntry(
                option=out.target_option,
                option_index=out.option_index,
                raw_score=out.method.score_result(out.payload, out.target_option, filtered_option),
                method=out.method,
            )
        )
    return entries


def combine_scores(entries: Sequence[ScoreEntry], num_options: int, *, negative: bool = False) -> List[float]:
    """
    Rescale each method to a 0..100 share, flip signs for negated questions,
    and sum across methods per option.
    """
    by_method: Dict[ScoringMethod, List[ScoreEntry]] = defaultdict(list)
    for e in entries:
        by_method[e.method].append(e)

    totals = [0.0] * num_options
    for method, group in by_method.items():
        method_total = sum(e.raw_score for e in group)
        scale = SCALE_TARGET / method_total if method_total > SCALE_EPSILON else 1.0
        logger.debug("method %s: %.1f hits, scale %.3f", method.name, method_total, scale)
        for e in group:
            s = e.raw_score * scale
            totals[e.option_index] += -s if negative else s
    return totals


def best_index(scores: Sequence[float]) -> int:
    """Index of the strictly highest score; the first one wins a tie."""
    best = 0
    for i, s in enumerate(scores):
        if s > scores[best]:
            best = i
    return best


def score_question(
    question: Question,
    outcomes: Sequence[SearchOutcome],
    stop_words: Sequence[str],
    *,
    negative: bool = False,
) -> int:
    """Fill question.scores from the collected outcomes and return the chosen option index."""
    entries = raw_scores(outcomes, stop_words)
    question.scores = combine_scores(entries, len(question.options), negative=negative)
    return best_index(question.scores)
