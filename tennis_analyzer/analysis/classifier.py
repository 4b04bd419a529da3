"""
Frame classifier.

Filters raw detector output by confidence and sorts what's left into
players, ball and court. The detector only knows generic labels, so the
ball and court also get caught by shape:

  - ball:  small and roughly square
  - court: large and clearly wider than tall

Players are the first `max_players` "person" detections in detector
order. Ball and court keep the single highest-scoring candidate; on a
tie the earlier one stays.
"""
from __future__ import annotations
from typing import Iterable, List, Optional

from ..models.detection import Detection
from ..models.frame     import FrameAnalysis
from .. import config


def _best(current: Optional[Detection], candidate: Detection) -> Detection:
    if current is None or candidate.score > current.score:
        return candidate
    return current


class FrameClassifier:
    """Assigns detections to player / ball / court for one frame."""

    def __init__(
        self,
        confidence_threshold:  float = config.CONFIDENCE_THRESHOLD,
        max_players:           int   = config.MAX_PLAYERS,
        player_label:          str   = config.PLAYER_LABEL,
        ball_label:            str   = config.BALL_LABEL,
        ball_max_area:         float = config.BALL_MAX_AREA_PX,
        ball_aspect_tolerance: float = config.BALL_ASPECT_TOLERANCE,
        court_min_area:        float = config.COURT_MIN_AREA_PX,
        court_min_aspect:      float = config.COURT_MIN_ASPECT,
    ):
        if not 0 < confidence_threshold <= 1:
            raise ValueError(
                f"confidence_threshold must be in (0, 1], got {confidence_threshold}"
            )
        if max_players < 0:
            raise ValueError(f"max_players must be >= 0, got {max_players}")
        self.confidence_threshold  = confidence_threshold
        self.max_players           = max_players
        self.player_label          = player_label
        self.ball_label            = ball_label
        self.ball_max_area         = ball_max_area
        self.ball_aspect_tolerance = ball_aspect_tolerance
        self.court_min_area        = court_min_area
        self.court_min_aspect      = court_min_aspect

    # ── Public API ─────────────────────────────────────────────────────────────

    def classify(
        self,
        detections: Iterable[Detection],
        frame_number: int = 0,
        timestamp_s: float = 0.0,
    ) -> FrameAnalysis:
        players: List[Detection] = []
        ball:  Optional[Detection] = None
        court: Optional[Detection] = None

        for det in detections:
            if det.score < self.confidence_threshold:
                continue

            if det.label == self.player_label:
                if len(players) < self.max_players:
                    players.append(det)
            elif det.label == self.ball_label or self.is_ball_like(det):
                ball = _best(ball, det)
            elif self.is_court_like(det):
                court = _best(court, det)

        return FrameAnalysis(
            frame_number=frame_number,
            timestamp_s=timestamp_s,
            players=tuple(players),
            ball=ball,
            court=court,
        )

    # ── Shape heuristics ───────────────────────────────────────────────────────

    def is_ball_like(self, det: Detection) -> bool:
        w, h = det.bbox.width, det.bbox.height
        return (det.bbox.area < self.ball_max_area
                and abs(w - h) < min(w, h) * self.ball_aspect_tolerance)

    def is_court_like(self, det: Detection) -> bool:
        w, h = det.bbox.width, det.bbox.height
        return det.bbox.area > self.court_min_area and w > h * self.court_min_aspect
