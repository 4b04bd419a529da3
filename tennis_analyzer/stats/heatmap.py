"""
Heatmap aggregation.

Accumulates bounding-box centres of classified detections into
occupancy grids, one for players and one for the ball. Grids are in
frame pixel space by default; pass `grid=(cols, rows)` to bin into a
coarser fixed grid instead.
"""
from __future__ import annotations
from typing import Iterable, Optional, Tuple, Union
import math

from ..models.frame import FrameAnalysis
from ..models.stats import Heatmap, HeatmapKind
from ..models.detection import Detection


def _as_kind(kind: Union[HeatmapKind, str]) -> HeatmapKind:
    if isinstance(kind, HeatmapKind):
        return kind
    try:
        return HeatmapKind(kind)
    except ValueError:
        raise ValueError(
            f"Unknown heatmap kind {kind!r}; expected one of "
            f"{[k.value for k in HeatmapKind]}"
        ) from None


class HeatmapAggregator:
    """Per-run player and ball occupancy counts over a width x height frame."""

    def __init__(
        self,
        width: int,
        height: int,
        grid: Optional[Tuple[int, int]] = None,
    ):
        if width <= 0 or height <= 0:
            raise ValueError(f"Heatmap size must be positive, got {width}x{height}")
        self.width  = width
        self.height = height
        self.grid   = grid
        cols, rows = grid if grid else (width, height)
        if cols <= 0 or rows <= 0:
            raise ValueError(f"Grid must be positive, got {cols}x{rows}")
        self._maps = {
            kind: Heatmap.zeros(kind, cols, rows) for kind in HeatmapKind
        }
        self.dropped = 0

    def update(self, analysis: FrameAnalysis) -> None:
        for player in analysis.players:
            self._add(HeatmapKind.PLAYERS, player)
        if analysis.has_ball:
            self._add(HeatmapKind.BALL, analysis.ball)

    def update_all(self, analyses: Iterable[FrameAnalysis]) -> "HeatmapAggregator":
        for analysis in analyses:
            self.update(analysis)
        return self

    def heatmap(self, kind: Union[HeatmapKind, str]) -> Heatmap:
        hm = self._maps[_as_kind(kind)]
        return Heatmap(kind=hm.kind, grid=hm.grid.copy())

    def _add(self, kind: HeatmapKind, det: Detection) -> None:
        cx, cy = det.bbox.center
        x, y = math.floor(cx), math.floor(cy)
        # Off-frame centres are not an error, just not counted.
        if not (0 <= x < self.width and 0 <= y < self.height):
            self.dropped += 1
            return
        if self.grid:
            cols, rows = self.grid
            x = x * cols // self.width
            y = y * rows // self.height
        self._maps[kind].grid[y, x] += 1


def generate_heatmap(
    analyses: Iterable[FrameAnalysis],
    width: int,
    height: int,
    kind: Union[HeatmapKind, str],
    grid: Optional[Tuple[int, int]] = None,
) -> Heatmap:
    """Build a single heatmap of `kind` from a sequence of frame analyses."""
    kind = _as_kind(kind)
    return HeatmapAggregator(width, height, grid=grid).update_all(analyses).heatmap(kind)
