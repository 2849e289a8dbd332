from __future__ import annotations

from pathlib import Path

import pytest

from loopbench.utils.io import read_json, sha256_json, write_json


def test_json_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "run.json"
    write_json(path, {"run_id": "abc", "config": {"seed": 1}})

    assert read_json(path) == {"run_id": "abc", "config": {"seed": 1}}


def test_read_json_missing_file(tmp_path: Path) -> None:
    with pytest.raises(RuntimeError, match="Failed to read JSON"):
        read_json(tmp_path / "absent.json")


def test_read_json_malformed(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid JSON"):
        read_json(path)


def test_sha256_json_ignores_key_order_but_not_values() -> None:
    first = sha256_json({"seed": 1, "methods": ["loop", "apply"], "nested": {"a": 1, "b": 2}})
    second = sha256_json({"nested": {"b": 2, "a": 1}, "methods": ("loop", "apply"), "seed": 1})

    assert first == second
    assert sha256_json({"seed": 1, "timestamp": "x"}) != sha256_json({"seed": 1})
