#!/usr/bin/env python3
"""Answer a trivia question from a screenshot.

Examples:
  triviacapture question.png
  triviacapture --live --interval 0.25 /tmp/capture.png   # re-run whenever the capture changes
  OCR_ENGINE=ppocr triviacapture -v question.png
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from typing import Optional

from .config import Settings
from .ocr.engines import ITxtExtractor, OcrInitError, make_extractor
from .trivia.errors import BotDetectionError, ConfigurationFormatError, SegmentationFailure
from .trivia.models import Answer
from .trivia.pipeline import answer_question, recognize_question
from .trivia.search import SearchClient, SearchScheduler
from .trivia.selftest import run_wordlist_selftest
from .trivia.wordlists import WordLists, load_wordlists

logger = logging.getLogger("triviacapture")


def format_answer(ans: Answer) -> str:
    q = ans.question
    out = [f"Q: {q.text}"]
    if ans.negative:
        out.append("   (negated question: lowest relevance wins)")
    for i, opt in enumerate(q.options):
        mark = "->" if i == ans.best_index else "  "
        score = q.scores[i] if q.scores else 0.0
        out.append(f"{mark} {i + 1}. {opt}  [{score:.1f}]")
    return "\n".join(out)


def _read_image(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


async def _solve_once(
    path: str,
    settings: Settings,
    words: WordLists,
    scheduler: SearchScheduler,
    extractor: ITxtExtractor,
) -> Answer:
    question = recognize_question(
        _read_image(path),
        extractor=extractor,
        min_confidence=settings.min_confidence,
        binarize=settings.ocr_binarize,
    )
    return await answer_question(question, words, scheduler)


async def _run(
    path: str,
    live: bool,
    interval: float,
    settings: Settings,
    words: WordLists,
    extractor: ITxtExtractor,
) -> int:
    client = SearchClient(
        settings.search_url,
        api_key=settings.search_api_key,
        cx=settings.search_cx,
        timeout_seconds=settings.search_timeout_seconds,
    )
    async with client:
        scheduler = SearchScheduler(client)

        if not live:
            try:
                ans = await _solve_once(path, settings, words, scheduler, extractor)
            except OSError as e:
                logger.error("Could not read image: %s", e)
                return 1
            except SegmentationFailure as e:
                logger.error("Could not recognize question: %s", e)
                return 1
            except BotDetectionError as e:
                logger.error("%s; stopping.", e)
                return 1
            print(format_answer(ans))
            return 0

        last_mtime: Optional[float] = None
        logger.info("Live mode: watching %s (every %.2fs). Ctrl+C to stop.", path, interval)
        while True:
            try:
                mtime = os.stat(path).st_mtime
            except OSError:
                mtime = None
            if mtime is not None and mtime != last_mtime:
                last_mtime = mtime
                try:
                    ans = await _solve_once(path, settings, words, scheduler, extractor)
                except OSError as e:
                    logger.warning("Could not read image: %s", e)
                except SegmentationFailure as e:
                    logger.warning("Could not recognize question: %s", e)
                except BotDetectionError as e:
                    logger.error("%s; stopping.", e)
                    return 1
                else:
                    print(format_answer(ans), flush=True)
            await asyncio.sleep(interval)


def main(argv: Optional[list] = None) -> int:
    p = argparse.ArgumentParser(prog="triviacapture", description="Answer a trivia question from a screenshot.")
    p.add_argument("image", nargs="?", help="Screenshot of the question card")
    p.add_argument("--live", action="store_true", help="Keep running and re-answer whenever the image changes")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging (OCR lines, clustering, scores)")
    p.add_argument("--engine", default=None, help="OCR engine: auto | tesseract | ppocr (default: $OCR_ENGINE)")
    p.add_argument("--wordlist", default=None, help="Word-list file (default: $WORDLIST_PATH or the bundled list)")
    p.add_argument("--interval", type=float, default=None, help="Live mode polling interval in seconds")

    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.image:
        print("No filename provided.", file=sys.stderr)
        return 1

    settings = Settings.from_env()

    try:
        words = load_wordlists(args.wordlist or settings.wordlist_path or None)
    except ConfigurationFormatError as e:
        logger.error("Bad word-list file: %s", e)
        return 1
    run_wordlist_selftest(words)

    logger.info("Initializing OCR engine...")
    try:
        extractor = make_extractor(args.engine or settings.ocr_engine)
    except OcrInitError as e:
        logger.error("%s", e)
        return 1

    interval = args.interval if args.interval is not None else settings.live_interval_seconds
    try:
        return asyncio.run(_run(args.image, args.live, interval, settings, words, extractor))
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    sys.exit(main())
