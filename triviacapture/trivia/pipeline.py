from __future__ import annotations

import logging
from typing import Optional

from ..ocr.engines import ITxtExtractor
from ..ocr.router import extract_lines
from .ingest import MIN_CONFIDENCE, ingest_lines
from .models import Answer, Question
from .negation import detect_negation
from .query import filter_query
from .scoring import score_question
from .search import SearchScheduler
from .segment import segment_question
from .wordlists import WordLists

logger = logging.getLogger("triviacapture")


def recognize_question(
    image_bytes: bytes,
    *,
    extractor: Optional[ITxtExtractor] = None,
    engine_hint: str = "auto",
    min_confidence: float = MIN_CONFIDENCE,
    binarize: bool = False,
) -> Question:
    """OCR a screenshot and split it into question and options. Raises SegmentationFailure."""
    res = extract_lines(image_bytes, engine_hint, extractor=extractor, binarize=binarize)
    lines = ingest_lines(res.lines, min_confidence=min_confidence)
    logger.debug("%d of %d OCR lines survived ingestion", len(lines), len(res.lines))
    question = segment_question(lines)
    logger.info("Successfully recognized question. %s", question)
    return question


async def answer_question(question: Question, words: WordLists, scheduler: SearchScheduler) -> Answer:
    """
    Search every (option, method) pair and rank the options.
    Raises BotDetectionError if the search provider blocked us.
    """
    filtered = filter_query(question.text, words.filtered)
    negative = detect_negation(question.text, words.negative)
    logger.debug("search phrase: %r (negative: %s)", filtered, negative)

    queries = scheduler.build_queries(question, filtered)
    outcomes = await scheduler.run(queries)
    idx = score_question(question, outcomes, words.filtered, negative=negative)
    return Answer(question=question, best_index=idx, negative=negative)


async def solve_image(
    image_bytes: bytes,
    words: WordLists,
    scheduler: SearchScheduler,
    *,
    extractor: Optional[ITxtExtractor] = None,
    engine_hint: str = "auto",
    min_confidence: float = MIN_CONFIDENCE,
    binarize: bool = False,
) -> Answer:
    question = recognize_question(
        image_bytes,
        extractor=extractor,
        engine_hint=engine_hint,
        min_confidence=min_confidence,
        binarize=binarize,
    )
    return await answer_question(question, words, scheduler)
