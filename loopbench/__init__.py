"""Timing harness comparing explicit loops with apply calls for column statistics."""

__version__ = "0.1.0"

__all__ = ["__version__"]
