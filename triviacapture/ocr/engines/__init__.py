from typing import Optional
from .itxt import ITxtExtractor, OcrInitError
from .tess import TesseractExtractor
try:
    from .ppocr import PPOCRExtractor  # optional
except ImportError:  # pragma: no cover
    PPOCRExtractor = None  # type: ignore

def make_extractor(name: Optional[str]) -> ITxtExtractor:
    """
    Factory. Supported names:
      - 'tesseract' / 'auto' (default)
      - 'ppocr' / 'rapidocr' / 'paddle'  (requires rapidocr_onnxruntime)
    Raises OcrInitError when the requested engine cannot start.
    """
    n = (name or "tesseract").strip().lower()
    if n in ("ppocr", "rapidocr", "paddle"):
        if PPOCRExtractor is None:
            raise OcrInitError("PPOCR engine not available (install rapidocr_onnxruntime)")
        return PPOCRExtractor()
    return TesseractExtractor()

__all__ = [
    "ITxtExtractor",
    "OcrInitError",
    "TesseractExtractor",
    "PPOCRExtractor",
    "make_extractor",
]
