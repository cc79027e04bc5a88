from io import BytesIO
import numpy as np
from PIL import Image, ImageFile, ImageOps

ImageFile.LOAD_TRUNCATED_IMAGES = True

def _otsu_threshold(gray_np: np.ndarray) -> int:
    hist, _ = np.histogram(gray_np.flatten(), bins=256, range=(0, 256))
    total = gray_np.size
    sum_total = np.dot(np.arange(256), hist)
    sum_b = 0.0
    w_b = 0.0
    max_var = 0.0
    threshold = 127
    for t in range(256):
        w_b += hist[t]
        if w_b == 0:
            continue
        w_f = total - w_b
        if w_f == 0:
            break
        sum_b += t * hist[t]
        m_b = sum_b / w_b
        m_f = (sum_total - sum_b) / w_f
        var_between = w_b * w_f * (m_b - m_f) ** 2
        if var_between > max_var:
            max_var = var_between
            threshold = t
    return threshold

def load_and_preprocess(image_bytes: bytes, *, binarize: bool = False) -> np.ndarray:
    """
    Decode a screenshot into a uint8 grayscale array for OCR.

    The image is never resized: column clustering thresholds are expressed
    in screen pixels, so bounding boxes must stay in the capture's geometry.
    """
    im = Image.open(BytesIO(image_bytes)).convert("RGB")
    im = ImageOps.autocontrast(im, cutoff=1)
    g = np.asarray(im.convert("L"), dtype=np.uint8)
    if not binarize:
        return g
    t = _otsu_threshold(g)
    bw = (g > t).astype(np.uint8) * 255
    # Prefer black text on white bg for Tesseract.
    return (255 - bw) if bw.mean() < 127 else bw
