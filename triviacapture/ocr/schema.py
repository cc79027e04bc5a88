from dataclasses import dataclass
from typing import List, Tuple

BBox = Tuple[int, int, int, int]  # x1,y1,x2,y2


@dataclass(frozen=True)
class TextLine:
    text: str
    conf: float  # 0..100
    bbox: BBox

    def __post_init__(self) -> None:
        x1, y1, x2, y2 = self.bbox
        if x1 > x2 or y1 > y2:
            raise ValueError(f"bounding box is not well-ordered: {self.bbox}")

    @property
    def x1(self) -> int:
        return self.bbox[0]

    @property
    def y1(self) -> int:
        return self.bbox[1]


@dataclass
class OcrResult:
    engine: str           # "tesseract" | "ppocr"
    conf: float           # mean confidence
    lines: List[TextLine]
