from .heatmap   import HeatmapAggregator, generate_heatmap
from .estimator import StatsEstimator, calculate_stats

__all__ = [
    "HeatmapAggregator", "generate_heatmap",
    "StatsEstimator", "calculate_stats",
]
