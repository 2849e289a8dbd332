"""Sequential timing sweep over matrix sizes, replicates and methods."""
from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional
from uuid import uuid4

import numpy as np
import pandas as pd

from loopbench.bench.config import SweepConfig
from loopbench.bench.env import collect_env
from loopbench.bench.summarise import rows_to_dataframe, summarise_trials
from loopbench.core.matrix import generate_matrix, make_rng
from loopbench.core.stats import Method, get_statistic
from loopbench.core.timer import time_call
from loopbench.report.render import write_report
from loopbench.utils.io import ensure_dir, sha256_json, write_csv, write_json
from loopbench.viz.timing_plot import plot_timings

__all__ = [
    "SweepArtifacts",
    "TrialResult",
    "cfg_hash",
    "row_counts",
    "run_and_persist",
    "run_sweep",
]

logger = logging.getLogger(__name__)

TRIALS_FILENAME = "trials.csv"
SUMMARY_FILENAME = "summary.csv"
RUN_FILENAME = "run.json"
CHART_FILENAME = "timings.png"
REPORT_FILENAME = "report.md"


@dataclass(frozen=True)
class TrialResult:
    """One timed invocation of a column statistic."""

    method: str
    statistic: str
    rows: int
    columns: int
    cell_count: int
    replicate: int
    elapsed_seconds: float

    def __post_init__(self) -> None:
        if self.cell_count != self.rows * self.columns:
            raise ValueError(
                f"cell_count {self.cell_count} does not match {self.rows} x {self.columns}"
            )
        if not math.isfinite(self.elapsed_seconds) or self.elapsed_seconds <= 0.0:
            raise ValueError(f"elapsed_seconds must be positive and finite, got {self.elapsed_seconds}")

    def as_row(self) -> Dict[str, Any]:
        return {
            "method": self.method,
            "statistic": self.statistic,
            "rows": self.rows,
            "columns": self.columns,
            "cell_count": self.cell_count,
            "replicate": self.replicate,
            "elapsed_seconds": self.elapsed_seconds,
        }


@dataclass
class SweepArtifacts:
    """Trials, their summary and the files written for one sweep."""

    run_id: str
    trials: List[TrialResult]
    summary: pd.DataFrame
    paths: Dict[str, Path] = field(default_factory=dict)


ProgressCallback = Callable[[TrialResult], None]


def cfg_hash(cfg: Mapping[str, Any]) -> str:
    """Return a short hash for ``cfg`` to keep artifact names stable."""

    return sha256_json(dict(cfg))[:8]


def row_counts(config: SweepConfig) -> List[int]:
    """Row counts visited by the sweep; ``max_rows`` is always the last entry."""

    counts = list(range(config.min_rows, config.max_rows + 1, config.row_step))
    if counts[-1] != config.max_rows:
        counts.append(config.max_rows)
    return counts


def run_sweep(
    config: SweepConfig,
    *,
    rng: Optional[np.random.Generator] = None,
    progress: Optional[ProgressCallback] = None,
) -> List[TrialResult]:
    """Time every (size, replicate, method) combination of ``config`` in order.

    Each trial gets a freshly generated matrix; only the statistic call is
    timed. The returned list is the complete result table.
    """

    generator = rng if rng is not None else make_rng(config.seed)
    statistic = config.statistic
    implementations = [(Method(name), get_statistic(name, statistic)) for name in config.methods]
    columns = config.fixed_columns

    trials: List[TrialResult] = []
    for rows in row_counts(config):
        cell_count = rows * columns
        logger.info("Timing %s statistic on %dx%d (%d cells)", statistic.value, rows, columns, cell_count)
        for replicate in range(config.replicate_count):
            for method, func in implementations:
                matrix = generate_matrix(
                    rows,
                    columns,
                    low=config.value_low,
                    high=config.value_high,
                    rng=generator,
                )
                timing = time_call(func, matrix)
                trial = TrialResult(
                    method=method.value,
                    statistic=statistic.value,
                    rows=rows,
                    columns=columns,
                    cell_count=cell_count,
                    replicate=replicate,
                    elapsed_seconds=timing.elapsed_seconds,
                )
                trials.append(trial)
                logger.debug(
                    "%s rows=%d replicate=%d elapsed=%.6fs", method.value, rows, replicate, trial.elapsed_seconds
                )
                if progress is not None:
                    progress(trial)
    return trials


def run_and_persist(
    config: SweepConfig,
    out_dir: str | os.PathLike[str],
    *,
    rng: Optional[np.random.Generator] = None,
    progress: Optional[ProgressCallback] = None,
) -> SweepArtifacts:
    """Run the sweep and write trials, summary, metadata, chart and write-up to ``out_dir``."""

    target = ensure_dir(out_dir)
    env = collect_env()
    config_dict = config.to_dict()
    run_id = _build_run_identifier(config_dict)
    started_at = datetime.now(timezone.utc)

    trials = run_sweep(config, rng=rng, progress=progress)
    summary = summarise_trials(rows_to_dataframe(trials))

    paths = {
        "trials": write_csv(target / TRIALS_FILENAME, (trial.as_row() for trial in trials)),
        "summary": target / SUMMARY_FILENAME,
        "run": target / RUN_FILENAME,
        "chart": target / CHART_FILENAME,
        "report": target / REPORT_FILENAME,
    }
    summary.to_csv(paths["summary"], index=False)

    run_meta = {
        "run_id": run_id,
        "created_at": started_at.isoformat(),
        "finished_at": datetime.now(timezone.utc).isoformat(),
        "config": config_dict,
        "env": env,
        "trial_count": len(trials),
        "artifacts": {name: path.name for name, path in paths.items()},
    }
    write_json(paths["run"], run_meta)

    plot_timings(summary, paths["chart"], title=_chart_title(config))
    write_report(paths["report"], summary, run_meta, chart_path=paths["chart"].name)

    for name, path in paths.items():
        logger.info("Wrote %s: %s", name, path)
    return SweepArtifacts(run_id=run_id, trials=trials, summary=summary, paths=paths)


def _chart_title(config: SweepConfig) -> str:
    return (
        f"Column {config.statistic_variant} statistic: "
        f"{' vs '.join(config.methods)} ({config.replicate_count} replicates)"
    )


def _build_run_identifier(cfg: Mapping[str, Any]) -> str:
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S")
    return f"{timestamp}-{cfg_hash(cfg)}-{uuid4().hex[:6]}"
