"""CLI for re-aggregating a saved trials table."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from loopbench.bench.summarise import load_trials, summarise_trials
from loopbench.utils.io import ensure_parent_dir

app = typer.Typer(
    add_completion=False,
    invoke_without_command=True,
    help="Aggregate trials into mean, standard error and 95% CI per size.",
)


@app.callback()
def summarise(
    trials: Path = typer.Option(..., "--trials", exists=True, readable=True, help="Path to trials.csv"),
    out: Optional[Path] = typer.Option(None, "--out", help="Summary CSV path (defaults beside the trials file)"),
    show: bool = typer.Option(False, "--show", help="Print the summary table"),
) -> None:
    """Write the per-(method, cell count) summary of ``trials``."""

    try:
        frame = load_trials(trials)
        summary = summarise_trials(frame)
    except ValueError as exc:
        typer.secho(f"[ERROR] {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc

    target = ensure_parent_dir(out or trials.with_name("summary.csv"))
    summary.to_csv(target, index=False)
    if show:
        typer.echo(summary.to_string(index=False))
    typer.echo(f"Summarised {len(frame)} trials into {len(summary)} groups: {target}")


__all__ = ["app", "summarise"]
