from .router import extract_lines
from .schema import BBox, OcrResult, TextLine

__all__ = [
    "BBox",
    "OcrResult",
    "TextLine",
    "extract_lines",
]
