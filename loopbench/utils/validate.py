"""Schema validation helpers."""
from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping

import jsonschema

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
SCHEMA_PATH = PACKAGE_ROOT / "schema" / "sweep.schema.json"


class ConfigError(ValueError):
    """Raised when a sweep configuration is unusable."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigValidationError(ConfigError):
    """Raised when a sweep configuration fails JSON Schema validation."""


@lru_cache(maxsize=1)
def _load_schema() -> Dict[str, Any]:
    with SCHEMA_PATH.open("r", encoding="utf-8") as handle:
        return json.load(handle)


@lru_cache(maxsize=1)
def _build_validator() -> jsonschema.Draft7Validator:
    return jsonschema.Draft7Validator(_load_schema())


def validate_sweep_schema(payload: Mapping[str, Any]) -> None:
    """Validate ``payload`` or raise :class:`ConfigValidationError`."""

    validator = _build_validator()
    errors = sorted(validator.iter_errors(dict(payload)), key=lambda err: [str(part) for part in err.path])
    if errors:
        formatted = "\n".join(
            f"{'/'.join(str(x) for x in error.path)}: {error.message}" if error.path else error.message
            for error in errors
        )
        raise ConfigValidationError(formatted)
