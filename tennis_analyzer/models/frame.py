"""
Frame-level and aggregate result models.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .detection import Detection
from .stats     import Heatmap, VideoStats


@dataclass(frozen=True)
class VideoMetadata:
    width: int
    height: int
    fps: float
    duration_s: float
    path: str = ""


@dataclass(frozen=True)
class FrameAnalysis:
    """Classified detections for a single sampled frame."""
    frame_number: int
    timestamp_s: float

    players: Tuple[Detection, ...] = ()
    ball: Optional[Detection] = None
    court: Optional[Detection] = None

    @classmethod
    def empty(cls, frame_number: int, timestamp_s: float) -> "FrameAnalysis":
        """Record for a frame where nothing could be detected."""
        return cls(frame_number=frame_number, timestamp_s=timestamp_s)

    @property
    def has_ball(self) -> bool:
        return self.ball is not None

    def to_dict(self) -> dict:
        return {
            "frame": self.frame_number,
            "timestamp_s": round(self.timestamp_s, 3),
            "players": [p.to_dict() for p in self.players],
            "ball": self.ball.to_dict() if self.ball else None,
            "court": self.court.to_dict() if self.court else None,
        }


@dataclass
class AnalysisResult:
    """Aggregate result for a full video pass."""
    metadata: VideoMetadata
    frames: List[FrameAnalysis] = field(default_factory=list)
    player_heatmap: Optional[Heatmap] = None
    ball_heatmap: Optional[Heatmap] = None
    stats: Optional[VideoStats] = None
    detector_available: bool = True

    def to_dict(self) -> dict:
        return {
            "video": {
                "path": self.metadata.path,
                "width": self.metadata.width,
                "height": self.metadata.height,
                "fps": self.metadata.fps,
                "duration_s": round(self.metadata.duration_s, 2),
            },
            "detector_available": self.detector_available,
            "frames_analyzed": len(self.frames),
            "stats": self.stats.to_dict() if self.stats else None,
            "heatmaps": {
                hm.kind.value: hm.summary()
                for hm in (self.player_heatmap, self.ball_heatmap)
                if hm is not None
            },
        }
