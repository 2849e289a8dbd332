"""Wall-clock timing of a single statistic invocation."""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Callable

__all__ = ["CLOCK_RESOLUTION", "Timing", "time_call"]

CLOCK_RESOLUTION = time.get_clock_info("perf_counter").resolution


@dataclass(frozen=True)
class Timing:
    """Elapsed seconds for one call together with the value it returned."""

    elapsed_seconds: float
    result: Any


def time_call(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Timing:
    """Invoke ``func`` once and measure it with ``time.perf_counter``.

    Readings below the clock resolution are reported as the resolution so a
    recorded duration is always positive.
    """

    start = time.perf_counter()
    result = func(*args, **kwargs)
    elapsed = time.perf_counter() - start
    return Timing(elapsed_seconds=max(elapsed, CLOCK_RESOLUTION), result=result)
