"""Root CLI entry point for loopbench."""
from __future__ import annotations

import typer

from . import plot as plot_cli
from . import report as report_cli
from . import sweep as sweep_cli
from . import summarise as summarise_cli

app = typer.Typer(add_completion=False, help="loopbench command line interface")
app.add_typer(sweep_cli.app, name="run", help="Run the loop vs apply timing sweep")
app.add_typer(summarise_cli.app, name="summarise", help="Aggregate a trials CSV into a summary")
app.add_typer(plot_cli.app, name="plot", help="Plot a summary CSV with CI bands")
app.add_typer(report_cli.app, name="report", help="Render the Markdown write-up for a run")


def run() -> None:
    """Execute the root CLI."""

    app()


__all__ = ["app", "run"]
