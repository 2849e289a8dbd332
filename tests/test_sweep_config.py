from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from loopbench.bench.config import SweepConfig, load_config
from loopbench.utils.validate import ConfigError, ConfigValidationError

CONFIG_DIR = Path(__file__).resolve().parents[1] / "configs"


def test_defaults_cover_two_to_thousand_rows() -> None:
    cfg = SweepConfig()

    assert (cfg.min_rows, cfg.max_rows, cfg.fixed_columns) == (2, 1000, 1000)
    assert cfg.replicate_count == 10
    assert cfg.statistic_variant == "simple"
    assert cfg.methods == ("loop", "apply")


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"replicate_count": 0}, "replicate_count"),
        ({"min_rows": 0}, "min_rows"),
        ({"fixed_columns": -3}, "fixed_columns"),
        ({"min_rows": 10, "max_rows": 5}, "must not exceed"),
        ({"statistic_variant": "median"}, "statistic_variant"),
        ({"methods": ()}, "at least one"),
        ({"methods": ("loop", "vectorised")}, "Unknown method"),
        ({"methods": ("loop", "loop")}, "must not repeat"),
        ({"seed": -1}, "seed"),
        ({"value_low": 5.0, "value_high": 1.0}, "value_low"),
        ({"value_low": float("nan")}, "finite"),
        ({"value_high": float("inf")}, "finite"),
        ({"value_low": 0.11, "value_high": 0.125}, "whole number of steps"),
        ({"value_high": "ten"}, "value_high must be a number"),
    ],
)
def test_invalid_configs_fail_fast(overrides, message) -> None:
    with pytest.raises(ConfigError, match=message):
        SweepConfig(**overrides)


def test_replace_revalidates() -> None:
    with pytest.raises(ConfigError):
        dataclasses.replace(SweepConfig(), replicate_count=0)


def test_load_config_reads_sweep_block(tmp_path: Path) -> None:
    path = tmp_path / "sweep.yaml"
    path.write_text(
        "sweep:\n  min_rows: 4\n  max_rows: 40\n  row_step: 4\n  fixed_columns: 10\n"
        "  replicate_count: 3\n  statistic_variant: complex\n  methods: [apply]\n  seed: 5\n",
        encoding="utf-8",
    )

    cfg = load_config(path)

    assert cfg.min_rows == 4
    assert cfg.statistic_variant == "complex"
    assert cfg.methods == ("apply",)
    assert cfg.seed == 5


def test_load_config_accepts_flat_mapping(tmp_path: Path) -> None:
    path = tmp_path / "flat.yaml"
    path.write_text("replicate_count: 7\n", encoding="utf-8")
    assert load_config(path).replicate_count == 7


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == SweepConfig()


def test_schema_rejects_unknown_keys(tmp_path: Path) -> None:
    path = tmp_path / "typo.yaml"
    path.write_text("sweep:\n  replicates: 5\n", encoding="utf-8")
    with pytest.raises(ConfigValidationError, match="replicates"):
        load_config(path)


def test_schema_reports_field_path(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("sweep:\n  replicate_count: 0\n  statistic_variant: median\n", encoding="utf-8")
    with pytest.raises(ConfigValidationError) as excinfo:
        load_config(path)
    assert "replicate_count" in excinfo.value.message
    assert "statistic_variant" in excinfo.value.message


def test_non_mapping_config_rejected(tmp_path: Path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="mapping"):
        load_config(path)


@pytest.mark.parametrize("name", ["simple.yaml", "complex.yaml", "smoke.yaml"])
def test_shipped_configs_load(name: str) -> None:
    cfg = load_config(CONFIG_DIR / name)
    assert cfg.replicate_count >= 1


def test_off_grid_bounds_rejected_while_loading(tmp_path: Path) -> None:
    path = tmp_path / "bounds.yaml"
    path.write_text("sweep:\n  value_low: 0.11\n  value_high: 0.125\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="value_low/value_high"):
        load_config(path)
