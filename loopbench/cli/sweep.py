"""CLI entrypoint for the loopbench timing sweep."""
from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import typer
import yaml

from loopbench.bench.config import SweepConfig, load_config
from loopbench.bench.run_sweep import run_and_persist
from loopbench.utils.validate import ConfigError

app = typer.Typer(
    add_completion=False,
    invoke_without_command=True,
    help="Time loop vs apply column statistics across matrix sizes.",
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _resolve_config(config: Optional[str], overrides: Dict[str, Any]) -> SweepConfig:
    cfg = SweepConfig() if config is None else load_config(config)
    overrides = {key: value for key, value in overrides.items() if value is not None}
    if overrides:
        cfg = dataclasses.replace(cfg, **overrides)
    return cfg


@app.callback()
def sweep(
    config: Optional[str] = typer.Option(None, "--config", help="Path to a sweep YAML configuration."),
    out_dir: str = typer.Option(
        "bench_runs", "--out-dir", help="Directory to store trials, summary, chart and report."
    ),
    replicates: Optional[int] = typer.Option(None, "--replicates", help="Override replicate_count."),
    statistic: Optional[str] = typer.Option(None, "--statistic", help="Override statistic_variant (simple|complex)."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Override the random seed."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress for every matrix size."),
) -> None:
    """Execute the timing sweep described by ``config``."""

    _configure_logging(verbose)

    if config is not None and not Path(config).exists():
        typer.secho(f"[ERROR] Sweep config not found: {config}", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    try:
        cfg = _resolve_config(
            config,
            {"replicate_count": replicates, "statistic_variant": statistic, "seed": seed},
        )
    except (ConfigError, yaml.YAMLError) as exc:
        typer.secho(f"[ERROR] Invalid sweep config: {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc
    except OSError as exc:
        typer.secho(f"[ERROR] Cannot read sweep config {config}: {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc

    artifacts = run_and_persist(cfg, out_dir)
    typer.echo(
        f"Completed {len(artifacts.trials)} trials. "
        f"Trials CSV: {artifacts.paths['trials']} Chart: {artifacts.paths['chart']} "
        f"Report: {artifacts.paths['report']}"
    )


__all__ = ["app", "sweep"]
