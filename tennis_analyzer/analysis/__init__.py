from .classifier import FrameClassifier

__all__ = ["FrameClassifier"]
