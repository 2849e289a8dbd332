"""Column-wise statistics, each written as an explicit loop and as an apply call.

Both implementations of a statistic must return the same vector (up to
floating point rounding); only the iteration mechanism differs. They are
registered under ``(method, statistic)`` keys so the sweep can look them up
by name.
"""
from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Tuple

import numpy as np

__all__ = [
    "Method",
    "Statistic",
    "SMALLEST_COUNT",
    "REGISTRY",
    "column_means_apply",
    "column_means_loop",
    "column_smallest_means_apply",
    "column_smallest_means_loop",
    "get_statistic",
    "register",
    "smallest_mean",
]

ColumnStatistic = Callable[[np.ndarray], np.ndarray]

SMALLEST_COUNT = 6


class Method(str, Enum):
    """How the statistic iterates over columns."""

    LOOP = "loop"
    APPLY = "apply"


class Statistic(str, Enum):
    """Which per-column statistic is computed."""

    SIMPLE = "simple"
    COMPLEX = "complex"


REGISTRY: Dict[Tuple[str, str], ColumnStatistic] = {}


def _key(method: Method | str, statistic: Statistic | str) -> Tuple[str, str]:
    return str(getattr(method, "value", method)), str(getattr(statistic, "value", statistic))


def register(method: Method, statistic: Statistic) -> Callable[[ColumnStatistic], ColumnStatistic]:
    """Decorator registering a column statistic implementation."""

    def decorator(func: ColumnStatistic) -> ColumnStatistic:
        REGISTRY[_key(method, statistic)] = func
        return func

    return decorator


def get_statistic(method: Method | str, statistic: Statistic | str) -> ColumnStatistic:
    """Return the implementation registered for ``method`` and ``statistic``."""

    key = _key(method, statistic)
    if key not in REGISTRY:
        known = ", ".join(f"{m}/{s}" for m, s in sorted(REGISTRY))
        raise KeyError(f"Unknown statistic '{key[0]}/{key[1]}'. Registered: {known}")
    return REGISTRY[key]


def _as_matrix(matrix: np.ndarray) -> np.ndarray:
    array = np.asarray(matrix, dtype=np.float64)
    if array.ndim != 2:
        raise ValueError(f"Expected a 2-D matrix, got {array.ndim} dimension(s)")
    return array


def smallest_mean(column: np.ndarray, k: int = SMALLEST_COUNT) -> float:
    """Mean of the ``k`` smallest values of ``column`` (all values when shorter)."""

    ordered = np.sort(column)
    return float(ordered[:k].mean())


@register(Method.LOOP, Statistic.SIMPLE)
def column_means_loop(matrix: np.ndarray) -> np.ndarray:
    data = _as_matrix(matrix)
    columns = data.shape[1]
    result = np.empty(columns, dtype=np.float64)
    for index in range(columns):
        result[index] = data[:, index].mean()
    return result


@register(Method.APPLY, Statistic.SIMPLE)
def column_means_apply(matrix: np.ndarray) -> np.ndarray:
    data = _as_matrix(matrix)
    return np.apply_along_axis(np.mean, 0, data)


@register(Method.LOOP, Statistic.COMPLEX)
def column_smallest_means_loop(matrix: np.ndarray) -> np.ndarray:
    data = _as_matrix(matrix)
    columns = data.shape[1]
    result = np.empty(columns, dtype=np.float64)
    for index in range(columns):
        result[index] = smallest_mean(data[:, index])
    return result


@register(Method.APPLY, Statistic.COMPLEX)
def column_smallest_means_apply(matrix: np.ndarray) -> np.ndarray:
    data = _as_matrix(matrix)
    return np.apply_along_axis(smallest_mean, 0, data)
