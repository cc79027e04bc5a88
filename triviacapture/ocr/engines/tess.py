import os
from typing import Dict, List, Tuple

import numpy as np

import pytesseract
from pytesseract import Output  # type: ignore

from ..schema import TextLine
from .itxt import ITxtExtractor, OcrInitError

# Allow override on Windows (desktop dev)
if os.name == "nt":
    tpath = os.getenv("TESSERACT_PATH")
    if tpath and os.path.exists(tpath):
        pytesseract.pytesseract.tesseract_cmd = tpath

def _cfg(psm: int = 3) -> str:
    # psm 3 = fully automatic page segmentation. Question cards mix the
    # question block with side UI text, so let Tesseract split the blocks.
    return f"--oem 1 --psm {psm} -c preserve_interword_spaces=1"

def _safe_float(x) -> float:
    try:
        return float(x)
    except (TypeError, ValueError):
        return float("nan")

def _group_tokens(data: Dict[str, List]) -> List[TextLine]:
    """
    Group image_to_data tokens back into lines using (block_num, par_num, line_num).
    Returns TextLine objects with joined text, mean conf (0..100), and line bbox.
    """
    n = len(data.get("text", []))
    groups: Dict[Tuple[int, int, int], List[int]] = {}

    for i in range(n):
        txt = (data["text"][i] or "").strip()
        if not txt:
            continue
        conf = _safe_float(data.get("conf", ["-1"])[i])
        if np.isnan(conf) or conf < 0:
            continue

        key = (
            int(data.get("block_num", [0])[i]),
            int(data.get("par_num", [0])[i]),
            int(data.get("line_num", [0])[i]),
        )
        groups.setdefault(key, []).append(i)

    out: List[TextLine] = []
    for idxs in groups.values():
        # preserve token order left->right
        idxs_sorted = sorted(idxs, key=lambda j: int(data["left"][j]))
        toks = [str(data["text"][j]).strip() for j in idxs_sorted]

        lefts = [int(data["left"][j]) for j in idxs_sorted]
        tops = [int(data["top"][j]) for j in idxs_sorted]
        rights = [int(data["left"][j]) + int(data["width"][j]) for j in idxs_sorted]
        bottoms = [int(data["top"][j]) + int(data["height"][j]) for j in idxs_sorted]

        confs = [_safe_float(data["conf"][j]) for j in idxs_sorted]
        mean_c = float(sum(confs) / len(confs))

        out.append(
            TextLine(
                text=" ".join(toks),
                conf=mean_c,
                bbox=(min(lefts), min(tops), max(rights), max(bottoms)),
            )
        )

    # Sort lines top->bottom, then left->right
    out.sort(key=lambda ln: (ln.bbox[1], ln.bbox[0]))
    return out

class TesseractExtractor(ITxtExtractor):
    """
    Line-level extraction with Tesseract.

    Tesseract reports words; we regroup them into text lines so every line
    carries one bounding box and one confidence, which is what the column
    clustering works on.
    """

    name = "tesseract"

    def __init__(self, lang: str = "eng") -> None:
        try:
            pytesseract.get_tesseract_version()
            langs = pytesseract.get_languages(config="")
        except (pytesseract.TesseractNotFoundError, pytesseract.TesseractError) as e:
            raise OcrInitError(f"Could not initialize tesseract: {e}") from e
        # Missing traineddata would otherwise only surface on the first run().
        for code in lang.split("+"):
            if code not in langs:
                raise OcrInitError(f"Could not initialize tesseract: language '{code}' is not installed")
        self.lang = lang

    def run(self, gray_l8: np.ndarray) -> List[TextLine]:
        assert gray_l8.ndim == 2, "expect grayscale (H,W)"

        # Tesseract expects uint8
        g = gray_l8.astype(np.uint8, copy=False)

        data = pytesseract.image_to_data(g, lang=self.lang, output_type=Output.DICT, config=_cfg())
        return _group_tokens(data)
