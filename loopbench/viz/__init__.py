"""Static chart rendering for loopbench summaries."""
from __future__ import annotations

from .timing_plot import TimingSeries, build_timing_series, plot_timings

__all__ = ["TimingSeries", "build_timing_series", "plot_timings"]
