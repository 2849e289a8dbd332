"""Aggregation of trial tables into per-size timing summaries."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Mapping, Union

import pandas as pd

from loopbench.utils.mathx import Z_95, confidence_interval, safe_div, standard_error

__all__ = [
    "GROUP_KEYS",
    "SUMMARY_COLUMNS",
    "TRIAL_COLUMNS",
    "load_summary",
    "load_trials",
    "method_ratio",
    "rows_to_dataframe",
    "summarise_trials",
    "summary_records",
]

TRIAL_COLUMNS = ["method", "statistic", "rows", "columns", "cell_count", "replicate", "elapsed_seconds"]
GROUP_KEYS = ["method", "statistic", "cell_count"]
SUMMARY_COLUMNS = GROUP_KEYS + [
    "rows",
    "columns",
    "n",
    "mean_seconds",
    "std_seconds",
    "stderr_seconds",
    "ci_low_seconds",
    "ci_high_seconds",
]

TrialsLike = Union[pd.DataFrame, Iterable[Any]]


def rows_to_dataframe(rows: Iterable[Any]) -> pd.DataFrame:
    """Return a trial DataFrame from ``TrialResult`` objects or row mappings."""

    records = [row.as_row() if hasattr(row, "as_row") else dict(row) for row in rows]
    return pd.DataFrame.from_records(records, columns=TRIAL_COLUMNS)


def _require_columns(frame: pd.DataFrame, required: Iterable[str], source: str) -> None:
    missing = [name for name in required if name not in frame.columns]
    if missing:
        raise ValueError(f"{source} is missing column(s): {', '.join(missing)}")


def load_trials(path: str | Path) -> pd.DataFrame:
    """Read a trials CSV written by the sweep."""

    frame = pd.read_csv(path)
    _require_columns(frame, TRIAL_COLUMNS, f"Trials file '{path}'")
    return frame


def load_summary(path: str | Path) -> pd.DataFrame:
    """Read a summary CSV written by :func:`summarise_trials`."""

    frame = pd.read_csv(path)
    _require_columns(frame, SUMMARY_COLUMNS, f"Summary file '{path}'")
    return frame


def summarise_trials(trials: TrialsLike, z: float = Z_95) -> pd.DataFrame:
    """Mean, standard error and ``mean ± z * stderr`` per (method, statistic, cell count).

    The standard deviation is the sample deviation (``ddof=1``); groups with a
    single trial report zero spread.
    """

    frame = trials if isinstance(trials, pd.DataFrame) else rows_to_dataframe(trials)
    if frame.empty:
        raise ValueError("No trials to summarise")
    _require_columns(frame, TRIAL_COLUMNS, "Trial table")

    summary = (
        frame.groupby(GROUP_KEYS, sort=True)
        .agg(
            rows=("rows", "first"),
            columns=("columns", "first"),
            n=("elapsed_seconds", "size"),
            mean_seconds=("elapsed_seconds", "mean"),
            std_seconds=("elapsed_seconds", "std"),
        )
        .reset_index()
    )
    summary["std_seconds"] = summary["std_seconds"].fillna(0.0)
    summary["stderr_seconds"] = [
        standard_error(std, int(n)) for std, n in zip(summary["std_seconds"], summary["n"])
    ]
    bounds = [
        confidence_interval(mean, stderr, z)
        for mean, stderr in zip(summary["mean_seconds"], summary["stderr_seconds"])
    ]
    summary["ci_low_seconds"] = [low for low, _ in bounds]
    summary["ci_high_seconds"] = [high for _, high in bounds]
    return summary[SUMMARY_COLUMNS]


def method_ratio(summary: pd.DataFrame, numerator: str = "loop", denominator: str = "apply") -> pd.DataFrame:
    """Ratio of mean times ``numerator / denominator`` per statistic and shared cell count."""

    means = summary.pivot_table(
        index=["statistic", "cell_count"], columns="method", values="mean_seconds", aggfunc="first"
    )
    if numerator not in means.columns or denominator not in means.columns:
        return pd.DataFrame(columns=["statistic", "cell_count", "ratio"])
    paired = means[[numerator, denominator]].dropna()
    ratios = [safe_div(num, den, default=float("nan")) for num, den in zip(paired[numerator], paired[denominator])]
    return pd.DataFrame(
        {
            "statistic": paired.index.get_level_values("statistic").to_numpy(),
            "cell_count": paired.index.get_level_values("cell_count").to_numpy(),
            "ratio": ratios,
        }
    )


def summary_records(summary: pd.DataFrame) -> list[Mapping[str, Any]]:
    """Return ``summary`` as a list of plain dictionaries."""

    return summary.to_dict(orient="records")
