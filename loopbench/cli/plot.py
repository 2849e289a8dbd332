"""CLI for rendering the timing chart from a summary table."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from loopbench.bench.summarise import load_summary
from loopbench.viz.timing_plot import plot_timings

app = typer.Typer(
    add_completion=False,
    invoke_without_command=True,
    help="Plot mean timings per matrix size with 95% CI bands.",
)


@app.callback()
def plot(
    summary: Path = typer.Option(..., "--summary", exists=True, readable=True, help="Path to summary.csv"),
    out: Optional[Path] = typer.Option(None, "--out", help="Image path (defaults to timings.png beside the summary)"),
    title: Optional[str] = typer.Option(None, "--title", help="Chart title"),
    log_x: bool = typer.Option(False, "--log-x", help="Use a logarithmic cell-count axis"),
) -> None:
    """Render ``summary`` to a static image."""

    try:
        frame = load_summary(summary)
        target = plot_timings(frame, out or summary.with_name("timings.png"), title=title, log_x=log_x)
    except ValueError as exc:
        typer.secho(f"[ERROR] {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc

    typer.echo(f"Chart written to {target}")


__all__ = ["app", "plot"]
