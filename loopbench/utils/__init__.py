"""Utility helpers for loopbench."""

from .io import ensure_dir, ensure_parent_dir, read_json, sha256_json, write_csv, write_json
from .mathx import Z_95, confidence_interval, safe_div, standard_error
from .validate import ConfigError, ConfigValidationError, validate_sweep_schema

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "Z_95",
    "confidence_interval",
    "ensure_dir",
    "ensure_parent_dir",
    "read_json",
    "safe_div",
    "sha256_json",
    "standard_error",
    "validate_sweep_schema",
    "write_csv",
    "write_json",
]
