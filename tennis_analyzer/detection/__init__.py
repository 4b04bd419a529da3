from .base import DetectorAdapter
from .yolo import YoloDetector

__all__ = ["DetectorAdapter", "YoloDetector"]
