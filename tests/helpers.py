from __future__ import annotations

from typing import Any, Dict, List


def build_trial_rows() -> List[Dict[str, Any]]:
    """Three replicates per method at two sizes of a 1000-column sweep."""

    timings = {
        ("loop", 2): [0.010, 0.012, 0.011],
        ("apply", 2): [0.020, 0.022, 0.021],
        ("loop", 1000): [0.40, 0.44, 0.42],
        ("apply", 1000): [0.20, 0.22, 0.21],
    }
    rows: List[Dict[str, Any]] = []
    for (method, n_rows), values in timings.items():
        for replicate, elapsed in enumerate(values):
            rows.append(
                {
                    "method": method,
                    "statistic": "simple",
                    "rows": n_rows,
                    "columns": 1000,
                    "cell_count": n_rows * 1000,
                    "replicate": replicate,
                    "elapsed_seconds": elapsed,
                }
            )
    return rows


def build_run_meta() -> Dict[str, Any]:
    return {
        "run_id": "20260101T000000-abcdef12-123456",
        "config": {
            "min_rows": 2,
            "max_rows": 1000,
            "row_step": 998,
            "fixed_columns": 1000,
            "replicate_count": 3,
            "statistic_variant": "simple",
            "methods": ["loop", "apply"],
            "seed": 1,
            "value_low": 0.11,
            "value_high": 10.0,
        },
        "env": {
            "cpu_name": "mock-cpu",
            "cpu_count": "4",
            "numpy_version": "1.x",
            "os": "Linux",
            "python_version": "3.x",
        },
        "trial_count": 12,
    }


def build_mixed_statistic_rows() -> List[Dict[str, Any]]:
    """Helper trials as ``simple`` plus a ``complex`` copy whose loop runs ten times slower."""

    rows = build_trial_rows()
    complex_rows = []
    for row in rows:
        scale = 10.0 if row["method"] == "loop" else 1.0
        complex_rows.append({**row, "statistic": "complex", "elapsed_seconds": row["elapsed_seconds"] * scale})
    return rows + complex_rows
