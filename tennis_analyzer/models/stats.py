"""
Derived per-video artefacts: occupancy heatmaps and summary statistics.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple
import numpy as np

from .. import config


class HeatmapKind(Enum):
    PLAYERS = "players"
    BALL    = "ball"


@dataclass
class Heatmap:
    """
    Occupancy counts over the frame's coordinate space.

    grid is indexed [row, col] = [y, x] and has shape (height, width).
    """
    kind: HeatmapKind
    grid: np.ndarray

    @classmethod
    def zeros(cls, kind: HeatmapKind, width: int, height: int) -> "Heatmap":
        return cls(kind=kind, grid=np.zeros((height, width), dtype=np.int64))

    @property
    def width(self) -> int:
        return int(self.grid.shape[1])

    @property
    def height(self) -> int:
        return int(self.grid.shape[0])

    @property
    def total(self) -> int:
        return int(self.grid.sum())

    def peak(self) -> Optional[Tuple[int, int]]:
        """(x, y) of the hottest cell, or None for an empty map."""
        if self.total == 0:
            return None
        y, x = np.unravel_index(int(np.argmax(self.grid)), self.grid.shape)
        return int(x), int(y)

    def downsample(self, cols: int, rows: int) -> "Heatmap":
        """
        Fold the map into a coarser cols x rows grid.

        Each source cell lands in exactly one target cell, so the total
        is preserved.
        """
        if cols <= 0 or rows <= 0:
            raise ValueError(f"Grid must be positive, got {cols}x{rows}")
        ys, xs = np.nonzero(self.grid)
        out = np.zeros((rows, cols), dtype=np.int64)
        np.add.at(
            out,
            (ys * rows // self.height, xs * cols // self.width),
            self.grid[ys, xs],
        )
        return Heatmap(kind=self.kind, grid=out)

    def summary(self, grid: Tuple[int, int] = config.HEATMAP_GRID) -> dict:
        """Size, total and peak, plus the map folded into a cols x rows grid."""
        peak = self.peak()
        return {
            "width": self.width,
            "height": self.height,
            "total": self.total,
            "peak": list(peak) if peak else None,
            "grid": self.downsample(*grid).grid.tolist(),
        }


@dataclass(frozen=True)
class VideoStats:
    shots: int = 0
    winners: int = 0
    errors: int = 0
    ball_detections: int = 0
    player_detections: int = 0
    average_players_per_frame: float = 0.0
    frames_analyzed: int = 0

    def to_dict(self) -> dict:
        return {
            "shots": self.shots,
            "winners": self.winners,
            "errors": self.errors,
            "ball_detections": self.ball_detections,
            "player_detections": self.player_detections,
            "average_players_per_frame": round(self.average_players_per_frame, 3),
            "frames_analyzed": self.frames_analyzed,
        }
