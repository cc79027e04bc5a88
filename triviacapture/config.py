from __future__ import annotations

import os
from dataclasses import dataclass


def _get_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    # OCR
    ocr_engine: str  # auto | tesseract | ppocr
    ocr_binarize: bool
    min_confidence: float

    # Search provider (Custom Search JSON compatible)
    search_url: str
    search_api_key: str
    search_cx: str
    search_timeout_seconds: float

    # Word lists; empty means the packaged default
    wordlist_path: str

    # Live mode: seconds between checks for a new capture
    live_interval_seconds: float

    # General
    environment: str

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            ocr_engine=(os.getenv("OCR_ENGINE") or "auto").strip().lower(),
            ocr_binarize=_get_bool("OCR_BINARIZE", False),
            min_confidence=_get_float("MIN_CONFIDENCE", 70.0),
            search_url=(os.getenv("SEARCH_URL") or "https://www.googleapis.com/customsearch/v1").strip(),
            search_api_key=(os.getenv("SEARCH_API_KEY") or "").strip(),
            search_cx=(os.getenv("SEARCH_CX") or "").strip(),
            search_timeout_seconds=_get_float("SEARCH_TIMEOUT_SECONDS", 10.0),
            wordlist_path=(os.getenv("WORDLIST_PATH") or "").strip(),
            live_interval_seconds=_get_float("LIVE_INTERVAL_SECONDS", 0.5),
            environment=(os.getenv("ENVIRONMENT") or os.getenv("ENV") or "local").strip() or "local",
        )
