"""Command-line interfaces for loopbench."""

from .main import app, run

__all__ = ["app", "run"]
