"""Sweep configuration model and YAML loading."""
from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

from loopbench.core.matrix import DEFAULT_HIGH, DEFAULT_LOW, DEFAULT_STEP, grid_levels
from loopbench.core.stats import Method, Statistic
from loopbench.utils.validate import ConfigError, validate_sweep_schema

__all__ = ["SweepConfig", "load_config"]

_POSITIVE_INT_FIELDS = ("min_rows", "max_rows", "row_step", "fixed_columns", "replicate_count")


@dataclass(frozen=True)
class SweepConfig:
    """Parameters of one timing sweep.

    Row counts run from ``min_rows`` to ``max_rows`` in ``row_step`` increments
    while the column count stays at ``fixed_columns``. Every size is measured
    ``replicate_count`` times per method.
    """

    min_rows: int = 2
    max_rows: int = 1000
    row_step: int = 1
    fixed_columns: int = 1000
    replicate_count: int = 10
    statistic_variant: str = Statistic.SIMPLE.value
    methods: Tuple[str, ...] = (Method.LOOP.value, Method.APPLY.value)
    seed: Optional[int] = None
    value_low: float = DEFAULT_LOW
    value_high: float = DEFAULT_HIGH

    def __post_init__(self) -> None:
        object.__setattr__(self, "methods", tuple(self.methods))
        self.validate()

    def validate(self) -> None:
        """Raise :class:`ConfigError` describing the first invalid field."""

        for name in _POSITIVE_INT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
            if value < 1:
                raise ConfigError(f"{name} must be at least 1, got {value}")
        if self.min_rows > self.max_rows:
            raise ConfigError(f"min_rows ({self.min_rows}) must not exceed max_rows ({self.max_rows})")

        statistics = {item.value for item in Statistic}
        if self.statistic_variant not in statistics:
            raise ConfigError(
                f"statistic_variant must be one of {sorted(statistics)}, got {self.statistic_variant!r}"
            )

        methods = {item.value for item in Method}
        if not self.methods:
            raise ConfigError("methods must name at least one method")
        unknown = [name for name in self.methods if name not in methods]
        if unknown:
            raise ConfigError(f"Unknown method(s) {unknown}; expected a subset of {sorted(methods)}")
        if len(set(self.methods)) != len(self.methods):
            raise ConfigError(f"methods must not repeat, got {list(self.methods)}")

        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int) or self.seed < 0):
            raise ConfigError(f"seed must be a non-negative integer or null, got {self.seed!r}")
        for name in ("value_low", "value_high"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"{name} must be a number, got {value!r}")
        if self.value_low > self.value_high:
            raise ConfigError(f"value_low ({self.value_low}) must not exceed value_high ({self.value_high})")
        try:
            grid_levels(self.value_low, self.value_high, DEFAULT_STEP)
        except ValueError as exc:
            raise ConfigError(f"value_low/value_high: {exc}") from exc

    @property
    def statistic(self) -> Statistic:
        return Statistic(self.statistic_variant)

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "SweepConfig":
        """Build a config from a plain mapping after JSON Schema validation."""

        validate_sweep_schema(payload)
        known = {item.name for item in fields(cls)}
        return cls(**{key: value for key, value in payload.items() if key in known})

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["methods"] = list(self.methods)
        return data


def load_config(path: str | Path) -> SweepConfig:
    """Read a YAML sweep configuration; keys may sit under a ``sweep:`` block."""

    config_path = Path(path)
    with config_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}
    if not isinstance(raw, Mapping):
        raise ConfigError(f"Config '{config_path}' must contain a mapping, got {type(raw).__name__}")

    payload = raw.get("sweep", raw)
    if not isinstance(payload, Mapping):
        raise ConfigError(f"'sweep' section in '{config_path}' must be a mapping")
    return SweepConfig.from_mapping(payload)
