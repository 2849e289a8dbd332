"""Report generation CLI for completed sweeps."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from jinja2 import TemplateNotFound

from loopbench.bench.run_sweep import CHART_FILENAME, REPORT_FILENAME, RUN_FILENAME, SUMMARY_FILENAME
from loopbench.bench.summarise import load_summary
from loopbench.report.render import write_report
from loopbench.utils.io import read_json

app = typer.Typer(
    add_completion=False,
    invoke_without_command=True,
    help="Render the Markdown write-up for a sweep directory.",
)


@app.callback()
def report(
    run_dir: Path = typer.Option(
        ..., "--run-dir", exists=True, file_okay=False, dir_okay=True, help="Directory written by 'loopbench run'"
    ),
    out: Optional[Path] = typer.Option(None, "--out", help="Markdown output path"),
    statistic: Optional[str] = typer.Option(
        None, "--statistic", help="Statistic to report when the summary holds more than one"
    ),
) -> None:
    """Regenerate ``report.md`` from ``summary.csv`` and ``run.json``."""

    summary_path = run_dir / SUMMARY_FILENAME
    if not summary_path.exists():
        typer.secho(f"[ERROR] Summary not found: {summary_path}", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    run_path = run_dir / RUN_FILENAME
    try:
        run_meta = read_json(run_path) if run_path.exists() else {}
        summary = load_summary(summary_path)
    except (ValueError, RuntimeError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    chart = CHART_FILENAME if (run_dir / CHART_FILENAME).exists() else None
    target = out or run_dir / REPORT_FILENAME
    try:
        write_report(target, summary, run_meta, chart_path=chart, statistic=statistic)
    except TemplateNotFound as exc:
        typer.echo(f"Error: missing template {exc.name}", err=True)
        raise typer.Exit(code=1)
    except ValueError as exc:
        typer.secho(f"[ERROR] {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc

    typer.echo(f"Report written to {target}")


__all__ = ["app", "report"]
