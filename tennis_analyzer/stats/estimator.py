"""
Shot / winner / error estimation from ball motion.

A "shot" is counted whenever the ball centre moves more than
`shot_distance_px` between two consecutive ball sightings. Frames with
no ball are ignored: they neither break nor extend the comparison.
Winners and errors are fixed fractions of the shot count, not detected
independently.
"""
from __future__ import annotations
from typing import Iterable, Optional, Tuple
import math
import numpy as np

from ..models.frame import FrameAnalysis
from ..models.stats import VideoStats
from .. import config


class StatsEstimator:
    """Derives VideoStats from a full run of frame analyses."""

    def __init__(
        self,
        shot_distance_px: float = config.SHOT_DISTANCE_PX,
        winner_ratio:     float = config.WINNER_RATIO,
        error_ratio:      float = config.ERROR_RATIO,
    ):
        if shot_distance_px < 0:
            raise ValueError(f"shot_distance_px must be >= 0, got {shot_distance_px}")
        for name, ratio in (("winner_ratio", winner_ratio), ("error_ratio", error_ratio)):
            if not 0 <= ratio <= 1:
                raise ValueError(f"{name} must be in [0, 1], got {ratio}")
        self.shot_distance_px = shot_distance_px
        self.winner_ratio     = winner_ratio
        self.error_ratio      = error_ratio

    def calculate(self, analyses: Iterable[FrameAnalysis]) -> VideoStats:
        ordered = sorted(analyses, key=lambda a: a.timestamp_s)

        shots = 0
        ball_detections = 0
        player_detections = 0
        prev: Optional[Tuple[float, float]] = None

        for analysis in ordered:
            player_detections += len(analysis.players)
            if not analysis.has_ball:
                continue
            ball_detections += 1
            cx, cy = analysis.ball.bbox.center
            if prev is not None:
                if np.hypot(cx - prev[0], cy - prev[1]) > self.shot_distance_px:
                    shots += 1
            prev = (cx, cy)

        n = len(ordered)
        return VideoStats(
            shots=shots,
            winners=math.floor(shots * self.winner_ratio),
            errors=math.floor(shots * self.error_ratio),
            ball_detections=ball_detections,
            player_detections=player_detections,
            average_players_per_frame=player_detections / n if n else 0.0,
            frames_analyzed=n,
        )


def calculate_stats(analyses: Iterable[FrameAnalysis]) -> VideoStats:
    """Stats with the configured default thresholds."""
    return StatsEstimator().calculate(analyses)
