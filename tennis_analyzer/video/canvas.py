"""
Off-screen raster buffer that sampled frames are drawn into.
"""
from __future__ import annotations
from typing import Optional
import cv2
import numpy as np

from ..errors import InvalidVideoError


class FrameCanvas:
    """Fixed-size BGR buffer, re-used for every sampled frame."""

    def __init__(self, width: int = 0, height: int = 0):
        self._buffer: Optional[np.ndarray] = None
        if width > 0 and height > 0:
            self.resize(width, height)

    @property
    def width(self) -> int:
        return 0 if self._buffer is None else int(self._buffer.shape[1])

    @property
    def height(self) -> int:
        return 0 if self._buffer is None else int(self._buffer.shape[0])

    def resize(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise InvalidVideoError(f"Invalid canvas size {width}x{height}")
        self._buffer = np.zeros((height, width, 3), dtype=np.uint8)

    def draw(self, image: np.ndarray) -> np.ndarray:
        """Copy image into the buffer, scaling it to the canvas size."""
        if self._buffer is None:
            raise InvalidVideoError("Canvas has no size; call resize() first")
        if image.ndim == 2:
            image = cv2.cvtColor(image, cv2.COLOR_GRAY2BGR)
        if image.shape[:2] != self._buffer.shape[:2]:
            image = cv2.resize(image, (self.width, self.height))
        np.copyto(self._buffer, image)
        return self._buffer

    @property
    def image(self) -> np.ndarray:
        if self._buffer is None:
            raise InvalidVideoError("Canvas has no size; call resize() first")
        return self._buffer
