"""
Tests for heatmap aggregation.
"""
import numpy as np
import pytest

from tennis_analyzer.models import HeatmapKind
from tennis_analyzer.stats import HeatmapAggregator, generate_heatmap

from conftest import ball_at, det, frame


class TestGenerateHeatmap:

    def test_empty_sequence_gives_zero_grid(self):
        hm = generate_heatmap([], width=64, height=48, kind="players")
        assert hm.grid.shape == (48, 64)
        assert not hm.grid.any()

    def test_players_binned_at_floored_center(self):
        analyses = [
            frame(0, players=[det(10, 10, 21, 31), det(40, 0, 41, 1)]),
            frame(1, players=[det(10, 10, 21, 31)]),
        ]
        hm = generate_heatmap(analyses, width=64, height=48, kind=HeatmapKind.PLAYERS)
        # centres (15.5, 20.5) twice and (40.5, 0.5) once
        assert hm.grid[20, 15] == 2
        assert hm.grid[0, 40] == 1
        assert hm.total == 3

    def test_ball_kind_ignores_players(self):
        analyses = [
            frame(0, ball=ball_at(5, 5), players=[det(10, 10, 20, 20)]),
            frame(1),
            frame(2, ball=ball_at(30, 7)),
        ]
        hm = generate_heatmap(analyses, width=64, height=48, kind="ball")
        assert hm.kind == HeatmapKind.BALL
        assert hm.grid[5, 5] == 1
        assert hm.grid[7, 30] == 1
        assert hm.total == 2

    def test_out_of_bounds_centres_dropped(self):
        analyses = [frame(0, players=[
            det(60, 10, 70, 20),     # x centre 65 >= width
            det(10, 45, 20, 55),     # y centre 50 >= height
            det(-3, 5, 2, 9),        # x centre -0.5 floors to -1
            det(0, 0, 2, 2),         # (1, 1), in bounds
        ])]
        hm = generate_heatmap(analyses, width=64, height=48, kind="players")
        assert hm.total == 1
        assert hm.grid[1, 1] == 1

    def test_sum_equals_in_bounds_detections(self):
        rng = np.random.default_rng(0)
        analyses = []
        expected = 0
        for n in range(50):
            ball = ball_at(*rng.uniform(-20, 120, size=2))
            cx, cy = ball.bbox.center
            if 0 <= np.floor(cx) < 100 and 0 <= np.floor(cy) < 80:
                expected += 1
            analyses.append(frame(n, ball=ball))
        hm = generate_heatmap(analyses, width=100, height=80, kind="ball")
        assert hm.total == expected
        assert (hm.grid >= 0).all()

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            generate_heatmap([], width=10, height=10, kind="court")

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            generate_heatmap([], width=0, height=10, kind="ball")


class TestHeatmapAggregator:

    def test_tracks_both_kinds_at_once(self):
        agg = HeatmapAggregator(100, 100)
        agg.update(frame(0, ball=ball_at(50, 50), players=[det(0, 0, 10, 10)]))
        assert agg.heatmap("players").total == 1
        assert agg.heatmap("ball").total == 1

    def test_returned_heatmap_is_a_copy(self):
        agg = HeatmapAggregator(100, 100)
        agg.update(frame(0, ball=ball_at(50, 50)))
        hm = agg.heatmap(HeatmapKind.BALL)
        hm.grid[:] = 0
        assert agg.heatmap(HeatmapKind.BALL).total == 1

    def test_dropped_counter(self):
        agg = HeatmapAggregator(10, 10)
        agg.update(frame(0, ball=ball_at(50, 50)))
        assert agg.dropped == 1

    def test_coarse_grid(self):
        agg = HeatmapAggregator(200, 100, grid=(20, 20))
        agg.update_all([
            frame(0, ball=ball_at(5, 2)),        # cell (0, 0)
            frame(1, ball=ball_at(199.5, 99.5)), # cell (19, 19)
            frame(2, ball=ball_at(105, 52)),     # cell (10, 10)
            frame(3, ball=ball_at(250, 50)),     # off frame
        ])
        hm = agg.heatmap("ball")
        assert hm.grid.shape == (20, 20)
        assert hm.grid[0, 0] == 1
        assert hm.grid[19, 19] == 1
        assert hm.grid[10, 10] == 1
        assert hm.total == 3

    def test_coarse_grid_matches_downsampled_full_map(self):
        analyses = [frame(n, ball=ball_at(7 * n % 200, 3 * n % 100)) for n in range(40)]
        coarse = generate_heatmap(analyses, 200, 100, "ball", grid=(20, 20))
        full = generate_heatmap(analyses, 200, 100, "ball")
        assert np.array_equal(coarse.grid, full.downsample(20, 20).grid)
