"""
Detector interface.

The pipeline only needs two calls from a backend: a one-off
initialize() and a per-frame detect(). Anything that can do object
detection (YOLO, a remote service, a scripted test double) plugs in
behind this.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List
import numpy as np

from ..models.detection import Detection


class DetectorAdapter(ABC):
    """Detector interface returning detections in pixel space."""

    @abstractmethod
    def initialize(self) -> bool:
        """
        Prepare the backend (load weights, open sessions, ...).

        Returns True on success, False if the backend is unavailable.
        Must be safe to call more than once.
        """

    @abstractmethod
    def detect(self, image: np.ndarray) -> List[Detection]:
        """
        Detect objects in a frame.

        Args:
            image: BGR image array of shape (H, W, 3).

        Returns:
            Raw detections in backend output order, unfiltered.
        """
