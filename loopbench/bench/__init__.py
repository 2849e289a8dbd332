"""Sweep harness utilities for loopbench."""

from .config import SweepConfig, load_config
from .env import collect_env
from .run_sweep import TrialResult, run_and_persist, run_sweep
from .summarise import summarise_trials

__all__ = [
    "SweepConfig",
    "TrialResult",
    "collect_env",
    "load_config",
    "run_and_persist",
    "run_sweep",
    "summarise_trials",
]
