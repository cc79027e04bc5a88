from abc import ABC, abstractmethod
from typing import List

import numpy as np

from ..schema import TextLine


class OcrInitError(RuntimeError):
    """The OCR engine could not be loaded or initialized."""


class ITxtExtractor(ABC):
    name: str = "unknown"

    @abstractmethod
    def run(self, gray_l8: np.ndarray) -> List[TextLine]:
        """Return text lines (conf 0..100) ordered top->bottom."""
