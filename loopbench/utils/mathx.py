"""Mathematical helper utilities for loopbench summaries."""
from __future__ import annotations

from math import isfinite, sqrt
from typing import Tuple

__all__ = ["Z_95", "safe_div", "standard_error", "confidence_interval"]

# Two-sided normal quantile for a 95% interval.
Z_95 = 1.96


def safe_div(numerator: float | int | None, denominator: float | int | None, default: float = 0.0) -> float:
    """Safely divide ``numerator`` by ``denominator``.

    Returns ``default`` whenever the denominator is zero or when either operand is ``None``.
    """

    try:
        if denominator in (0, 0.0) or denominator is None:
            return float(default)
        if numerator is None:
            return float(default)
        return float(numerator) / float(denominator)
    except (TypeError, ZeroDivisionError):
        return float(default)


def standard_error(std: float | None, n: int) -> float:
    """Return ``std / sqrt(n)``; single observations and missing deviations yield ``0.0``."""

    if n < 2 or std is None or not isfinite(float(std)):
        return 0.0
    return float(std) / sqrt(n)


def confidence_interval(mean: float, stderr: float, z: float = Z_95) -> Tuple[float, float]:
    """Return the ``(low, high)`` bounds of ``mean ± z * stderr``."""

    margin = z * float(stderr)
    return float(mean) - margin, float(mean) + margin
