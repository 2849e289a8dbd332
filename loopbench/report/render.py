"""Markdown write-up of a timing sweep rendered from jinja2 templates."""
from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import numpy as np
import pandas as pd
from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from loopbench.bench.summarise import method_ratio, summary_records
from loopbench.utils.io import ensure_parent_dir

__all__ = ["build_report_payload", "render_report", "write_report"]

_TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
_ENV = Environment(
    loader=FileSystemLoader(_TEMPLATE_DIR),
    autoescape=select_autoescape(["html"]),
    undefined=StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
)

_STATISTIC_TEXT = {
    "simple": "the arithmetic mean of each column",
    "complex": "the mean of the six smallest values of each column (sort ascending, keep the first six)",
}


def _pick_cell_counts(cell_counts: List[int], limit: int) -> List[int]:
    if len(cell_counts) <= limit:
        return cell_counts
    positions = np.linspace(0, len(cell_counts) - 1, num=limit).round().astype(int)
    return [cell_counts[pos] for pos in sorted(set(positions.tolist()))]


def _table_rows(summary: pd.DataFrame, ratios: pd.DataFrame, limit: int) -> List[Dict[str, Any]]:
    cell_counts = sorted(int(value) for value in summary["cell_count"].unique())
    ratio_lookup = {int(row["cell_count"]): float(row["ratio"]) for row in ratios.to_dict(orient="records")}
    by_cell: Dict[int, Dict[str, Mapping[str, Any]]] = {}
    for record in summary_records(summary):
        by_cell.setdefault(int(record["cell_count"]), {})[str(record["method"])] = record

    rows: List[Dict[str, Any]] = []
    for cell_count in _pick_cell_counts(cell_counts, limit):
        methods = by_cell.get(cell_count, {})
        first = next(iter(methods.values()))
        rows.append(
            {
                "cell_count": cell_count,
                "rows": int(first["rows"]),
                "columns": int(first["columns"]),
                "methods": methods,
                "ratio": ratio_lookup.get(cell_count),
            }
        )
    return rows


def _select_statistic(summary: pd.DataFrame, statistic: Optional[str]) -> tuple[pd.DataFrame, str]:
    present = sorted(str(name) for name in summary["statistic"].unique())
    if statistic is None:
        if len(present) > 1:
            raise ValueError(
                f"Summary mixes statistics {present}; render one report per statistic"
            )
        return summary, present[0]
    if statistic not in present:
        raise ValueError(f"Statistic '{statistic}' not in summary; found {present}")
    return summary[summary["statistic"] == statistic].reset_index(drop=True), statistic


def build_report_payload(
    summary: pd.DataFrame,
    run_meta: Mapping[str, Any],
    *,
    chart_path: Optional[str] = None,
    statistic: Optional[str] = None,
    table_limit: int = 12,
) -> Dict[str, Any]:
    """Collect everything the write-up template needs from ``summary`` and ``run_meta``.

    A report covers a single statistic. A summary holding several must name
    the one to report through ``statistic``; otherwise ``ValueError`` is raised.
    """

    if summary.empty:
        raise ValueError("Cannot build a report from an empty summary")

    summary, statistic = _select_statistic(summary, statistic)
    config = dict(run_meta.get("config", {}))
    methods = [str(name) for name in config.get("methods") or sorted(summary["method"].unique())]
    ratios = method_ratio(summary)

    largest = None
    if not ratios.empty:
        last = ratios.sort_values("cell_count").iloc[-1]
        largest = {"cell_count": int(last["cell_count"]), "ratio": float(last["ratio"])}

    return {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "run_id": run_meta.get("run_id", "unknown"),
        "config": config,
        "env": dict(run_meta.get("env", {})),
        "trial_count": int(summary["n"].sum()),
        "statistic": statistic,
        "statistic_text": _STATISTIC_TEXT.get(statistic, statistic),
        "methods": methods,
        "table": _table_rows(summary, ratios, table_limit),
        "largest": largest,
        "chart_path": chart_path,
    }


def render_report(
    summary: pd.DataFrame,
    run_meta: Mapping[str, Any],
    *,
    chart_path: Optional[str] = None,
    statistic: Optional[str] = None,
    template_name: str = "report.md.j2",
) -> str:
    """Render the Markdown write-up for one sweep."""

    payload = build_report_payload(summary, run_meta, chart_path=chart_path, statistic=statistic)
    template = _ENV.get_template(template_name)
    return template.render(report=payload)


def write_report(
    destination: str | Path,
    summary: pd.DataFrame,
    run_meta: Mapping[str, Any],
    *,
    chart_path: Optional[str] = None,
    statistic: Optional[str] = None,
) -> Path:
    text = render_report(summary, run_meta, chart_path=chart_path, statistic=statistic)
    path = ensure_parent_dir(destination)
    path.write_text(text, encoding="utf-8")
    return path
