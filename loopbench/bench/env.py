"""Environment capture helpers for loopbench runs."""
from __future__ import annotations

import os
import platform
import subprocess
from pathlib import Path
from typing import Optional

import numpy as np

__all__ = [
    "collect_env",
    "get_cpu_name",
]


def _run(cmd: list[str]) -> Optional[str]:
    """Run ``cmd`` returning stripped stdout or ``None`` on failure."""

    try:
        return subprocess.check_output(
            cmd, stderr=subprocess.STDOUT, text=True, timeout=5
        ).strip()
    except (OSError, subprocess.SubprocessError):
        return None


def _cpu_from_proc(path: Path = Path("/proc/cpuinfo")) -> Optional[str]:
    try:
        content = path.read_text(encoding="utf-8")
    except OSError:
        return None
    for line in content.splitlines():
        if line.lower().startswith("model name"):
            _, _, value = line.partition(":")
            return value.strip() or None
    return None


def get_cpu_name() -> str:
    """Return a human readable CPU model or ``unknown``."""

    if platform.system() == "Darwin":
        brand = _run(["sysctl", "-n", "machdep.cpu.brand_string"])
        if brand:
            return brand
    name = _cpu_from_proc() or platform.processor() or platform.machine()
    return name or "unknown"


def collect_env() -> dict[str, str]:
    """Collect stable environment metadata for benchmark outputs."""

    return {
        "cpu_name": get_cpu_name(),
        "cpu_count": str(os.cpu_count() or "unknown"),
        "numpy_version": np.__version__,
        "os": f"{platform.system()} {platform.release()}",
        "python_version": platform.python_version(),
    }
