"""
Tennis Analyzer – package.

Public API:  all major components are importable directly from
`tennis_analyzer`.

    from tennis_analyzer import Pipeline
    from tennis_analyzer import YoloDetector, DetectorAdapter
    from tennis_analyzer import OpenCVVideoSource, FrameCanvas, FrameSampler
    from tennis_analyzer import FrameClassifier
    from tennis_analyzer import HeatmapAggregator, generate_heatmap
    from tennis_analyzer import StatsEstimator, calculate_stats
"""

# ── Pipeline (top-level entry point) ─────────────────────────────────────────
from .pipeline import Pipeline

# ── Detection ─────────────────────────────────────────────────────────────────
from .detection import DetectorAdapter, YoloDetector

# ── Video sampling ────────────────────────────────────────────────────────────
from .video import (
    VideoSource, OpenCVVideoSource, FrameCanvas,
    FrameSampler, SampledFrame, sample_times,
)

# ── Classification ────────────────────────────────────────────────────────────
from .analysis import FrameClassifier

# ── Stats ─────────────────────────────────────────────────────────────────────
from .stats import (
    HeatmapAggregator, generate_heatmap,
    StatsEstimator, calculate_stats,
)

# ── Errors ────────────────────────────────────────────────────────────────────
from .errors import (
    AnalyzerError, DetectorUnavailableError,
    InvalidVideoError, SeekError, SeekTimeoutError,
)

# ── Models (data classes) ─────────────────────────────────────────────────────
from .models import (
    BoundingBox, Detection,
    Heatmap, HeatmapKind, VideoStats,
    FrameAnalysis, VideoMetadata, AnalysisResult,
)

__all__ = [
    # Pipeline
    "Pipeline",
    # Detection
    "DetectorAdapter", "YoloDetector",
    # Video
    "VideoSource", "OpenCVVideoSource", "FrameCanvas",
    "FrameSampler", "SampledFrame", "sample_times",
    # Classification
    "FrameClassifier",
    # Stats
    "HeatmapAggregator", "generate_heatmap",
    "StatsEstimator", "calculate_stats",
    # Errors
    "AnalyzerError", "DetectorUnavailableError",
    "InvalidVideoError", "SeekError", "SeekTimeoutError",
    # Models
    "BoundingBox", "Detection",
    "Heatmap", "HeatmapKind", "VideoStats",
    "FrameAnalysis", "VideoMetadata", "AnalysisResult",
]
