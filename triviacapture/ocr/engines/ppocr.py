import numpy as np
from typing import List
from rapidocr_onnxruntime import RapidOCR
from ..schema import TextLine
from .itxt import ITxtExtractor, OcrInitError

class PPOCRExtractor(ITxtExtractor):
    name = "ppocr"

    def __init__(self):
        # Downloads tiny models on first use; keep one instance
        try:
            self.ocr = RapidOCR()
        except Exception as e:
            raise OcrInitError(f"Could not initialize RapidOCR: {e}") from e

    def run(self, gray_l8: np.ndarray) -> List[TextLine]:
        bgr = np.stack([gray_l8] * 3, axis=-1)
        result, _elapse = self.ocr(bgr)  # list of [box, text, score] or None
        out: List[TextLine] = []
        for b, t, c in result or []:
            t = (t or "").strip()
            if not t:
                continue
            xs = [int(p[0]) for p in b]
            ys = [int(p[1]) for p in b]
            # RapidOCR scores are 0..1; the pipeline thresholds on 0..100
            out.append(TextLine(text=t, conf=float(c) * 100.0, bbox=(min(xs), min(ys), max(xs), max(ys))))
        out.sort(key=lambda ln: (ln.bbox[1], ln.bbox[0]))
        return out
