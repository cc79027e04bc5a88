from __future__ import annotations

import logging
from typing import Optional

from .engines import ITxtExtractor, make_extractor
from .preprocess import load_and_preprocess
from .schema import OcrResult

logger = logging.getLogger("triviacapture")


def mean_conf(result: OcrResult) -> float:
    return sum(ln.conf for ln in result.lines) / max(1, len(result.lines))


def extract_lines(
    image_bytes: bytes,
    engine_hint: str = "auto",
    *,
    extractor: Optional[ITxtExtractor] = None,
    binarize: bool = False,
) -> OcrResult:
    """
    High-level OCR entry point used by the pipeline.
    Pass a prebuilt extractor in live mode so the engine is initialized once.
    """
    ex = extractor or make_extractor(engine_hint)
    gray = load_and_preprocess(image_bytes, binarize=binarize)
    lines = ex.run(gray)
    res = OcrResult(engine=ex.name, conf=0.0, lines=lines)
    res.conf = mean_conf(res)
    logger.debug("%s: %d line(s), mean conf %.1f", res.engine, len(lines), res.conf)
    for ln in lines:
        logger.debug("line: %r (conf: %.1f); box%s", ln.text, ln.conf, ln.bbox)
    return res
