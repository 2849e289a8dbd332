"""Pytest configuration for loopbench tests."""
from __future__ import annotations

import importlib
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from loopbench.bench.config import SweepConfig  # noqa: E402


@pytest.fixture
def tiny_config() -> SweepConfig:
    return SweepConfig(
        min_rows=2,
        max_rows=8,
        row_step=3,
        fixed_columns=5,
        replicate_count=2,
        statistic_variant="simple",
        seed=11,
    )


@pytest.fixture
def fake_env(monkeypatch):
    sweep_module = importlib.import_module("loopbench.bench.run_sweep")

    env = {
        "cpu_name": "mock-cpu",
        "cpu_count": "4",
        "numpy_version": "1.x",
        "os": "Linux",
        "python_version": "3.x",
    }
    monkeypatch.setattr(sweep_module, "collect_env", lambda: dict(env))
    return env
