"""Random matrix generation for timing trials."""
from __future__ import annotations

import math
from typing import Optional

import numpy as np

DEFAULT_LOW = 0.11
DEFAULT_HIGH = 10.0
DEFAULT_STEP = 0.01

__all__ = ["DEFAULT_HIGH", "DEFAULT_LOW", "DEFAULT_STEP", "generate_matrix", "grid_levels", "make_rng"]

_GRID_TOLERANCE = 1e-9


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Return a numpy ``Generator`` seeded with ``seed`` (fresh entropy when ``None``)."""

    return np.random.default_rng(seed)


def _check_dimension(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return int(value)


def grid_levels(low: float, high: float, step: float) -> int:
    """Number of values on the grid ``low, low+step, ..., high``.

    Bounds must be finite and ``high - low`` a whole number of steps, so that
    ``high`` itself lies on the grid.
    """

    for name, value in (("low", low), ("high", high), ("step", step)):
        if not math.isfinite(value):
            raise ValueError(f"{name} must be finite, got {value}")
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    if low > high:
        raise ValueError(f"low ({low}) must not exceed high ({high})")

    span = (high - low) / step
    whole = round(span)
    if abs(span - whole) > _GRID_TOLERANCE * max(1.0, span):
        raise ValueError(f"high - low ({high} - {low}) must be a whole number of steps of {step}")
    return int(whole) + 1


def generate_matrix(
    rows: int,
    columns: int,
    *,
    low: float = DEFAULT_LOW,
    high: float = DEFAULT_HIGH,
    step: float = DEFAULT_STEP,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """Return a ``rows`` x ``columns`` float64 matrix drawn from ``low, low+step, ..., high``.

    Every cell is an independent uniform draw from the grid. The result is
    allocated once at its final size and filled in place.
    """

    n_rows = _check_dimension("rows", rows)
    n_cols = _check_dimension("columns", columns)
    levels = grid_levels(low, high, step)
    generator = rng if rng is not None else make_rng()

    matrix = np.empty((n_rows, n_cols), dtype=np.float64)
    ticks = generator.integers(0, levels, size=(n_rows, n_cols))
    np.multiply(ticks, step, out=matrix)
    matrix += low
    # grid arithmetic can overshoot ``high`` by one ulp
    np.clip(matrix, low, high, out=matrix)
    return matrix
