"""Matrix generation, column statistics and timing primitives."""

from .matrix import generate_matrix, grid_levels, make_rng
from .stats import Method, Statistic, get_statistic, smallest_mean
from .timer import Timing, time_call

__all__ = [
    "Method",
    "Statistic",
    "Timing",
    "generate_matrix",
    "get_statistic",
    "grid_levels",
    "make_rng",
    "smallest_mean",
    "time_call",
]
