"""
Core data models for Tennis Analyzer.
Split across sub-modules; this __init__ re-exports everything.
"""
from .detection import BoundingBox, Detection
from .stats     import Heatmap, HeatmapKind, VideoStats
from .frame     import FrameAnalysis, VideoMetadata, AnalysisResult

__all__ = [
    "BoundingBox", "Detection",
    "Heatmap", "HeatmapKind", "VideoStats",
    "FrameAnalysis", "VideoMetadata", "AnalysisResult",
]
