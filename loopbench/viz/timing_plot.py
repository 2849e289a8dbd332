"""Static timing charts with confidence bands."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import matplotlib

matplotlib.use("Agg")  # Non-interactive backend; charts are only written to disk
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from loopbench.utils.io import ensure_parent_dir

__all__ = ["TimingSeries", "build_timing_series", "plot_timings"]

_METHOD_COLORS = {
    "loop": "#C73E1D",
    "apply": "#2E86AB",
}
_FALLBACK_COLOR = "#546E7A"
_STATISTIC_LINESTYLES = {
    "simple": "-",
    "complex": "--",
}


@dataclass
class TimingSeries:
    """One line of the timing chart: a method/statistic pair across cell counts."""

    method: str
    statistic: str
    cell_counts: np.ndarray
    means: np.ndarray
    ci_low: np.ndarray
    ci_high: np.ndarray

    @property
    def label(self) -> str:
        return f"{self.method} ({self.statistic})"

    @property
    def color(self) -> str:
        return _METHOD_COLORS.get(self.method, _FALLBACK_COLOR)

    @property
    def linestyle(self) -> str:
        return _STATISTIC_LINESTYLES.get(self.statistic, ":")


def build_timing_series(summary: pd.DataFrame) -> List[TimingSeries]:
    """Split ``summary`` into per-method series ordered by cell count."""

    series: List[TimingSeries] = []
    for (method, statistic), group in summary.groupby(["method", "statistic"], sort=True):
        ordered = group.sort_values("cell_count")
        series.append(
            TimingSeries(
                method=str(method),
                statistic=str(statistic),
                cell_counts=ordered["cell_count"].to_numpy(dtype=np.int64),
                means=ordered["mean_seconds"].to_numpy(dtype=np.float64),
                ci_low=ordered["ci_low_seconds"].to_numpy(dtype=np.float64),
                ci_high=ordered["ci_high_seconds"].to_numpy(dtype=np.float64),
            )
        )
    return series


def plot_timings(
    summary: pd.DataFrame,
    path: str | Path,
    *,
    title: Optional[str] = None,
    log_x: bool = False,
    dpi: int = 150,
) -> Path:
    """Render mean elapsed time against cell count with shaded 95% CI bands."""

    series = build_timing_series(summary)
    if not series:
        raise ValueError("Summary has no rows to plot")

    fig, ax = plt.subplots(figsize=(10, 6))
    try:
        for line in series:
            ax.plot(
                line.cell_counts,
                line.means,
                color=line.color,
                linestyle=line.linestyle,
                linewidth=2.0,
                label=line.label,
            )
            ax.fill_between(line.cell_counts, line.ci_low, line.ci_high, color=line.color, alpha=0.2)

        ax.set_xlabel("Matrix cells (rows x columns)")
        ax.set_ylabel("Mean elapsed time [s]")
        if log_x:
            ax.set_xscale("log")
        ax.set_title(title or "Column statistic timings")
        ax.grid(True, color="#E0E0E0", linewidth=0.5)
        ax.spines["top"].set_visible(False)
        ax.spines["right"].set_visible(False)
        ax.legend(loc="upper left", frameon=True)

        target = ensure_parent_dir(path)
        fig.savefig(target, dpi=dpi, bbox_inches="tight", facecolor="white", edgecolor="none")
    finally:
        plt.close(fig)
    return target

