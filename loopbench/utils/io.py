"""JSON and CSV IO helpers for loopbench artifacts."""
from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping

__all__ = [
    "ensure_dir",
    "ensure_parent_dir",
    "read_json",
    "write_json",
    "sha256_json",
    "write_csv",
]


def read_json(path: str | Path) -> Dict[str, Any]:
    """Load a JSON file and return the decoded object."""

    file_path = Path(path)
    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(f"Failed to read JSON file '{file_path}': {exc}") from exc

    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in '{file_path}': {exc}") from exc


def ensure_dir(path: str | Path) -> Path:
    """Create ``path`` (and parents) when missing and return it as a ``Path``."""

    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def ensure_parent_dir(path: str | Path) -> Path:
    """Ensure the parent directory for ``path`` exists and return the resolved ``Path``."""

    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    return file_path


def write_json(path: str | Path, obj: Dict[str, Any]) -> None:
    """Persist ``obj`` to ``path`` with deterministic formatting."""

    file_path = ensure_parent_dir(path)
    serialized = json.dumps(obj, ensure_ascii=False, indent=2, sort_keys=True)
    file_path.write_text(serialized + "\n", encoding="utf-8")


def write_csv(path: str | Path, rows: Iterable[Mapping[str, Any]]) -> Path:
    """Write ``rows`` as a comma separated table; the first row fixes the header."""

    file_path = ensure_parent_dir(path)
    materialised: List[Mapping[str, Any]] = list(rows)
    if not materialised:
        raise ValueError(f"No rows to write to '{file_path}'")
    fieldnames = list(materialised[0].keys())
    with file_path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerows(materialised)
    return file_path


def sha256_json(obj: Any) -> str:
    """Return the SHA-256 hex digest of ``obj`` with canonical ordering."""

    canonical = _canonicalize(obj)
    payload = json.dumps(canonical, ensure_ascii=False, sort_keys=True, separators=(",", ":"))
    return _sha256(payload)


def _sha256(payload: str) -> str:
    from hashlib import sha256

    return sha256(payload.encode("utf-8")).hexdigest()


def _canonicalize(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _canonicalize(value[key]) for key in sorted(value)}
    if isinstance(value, (list, tuple)):
        return [_canonicalize(item) for item in value]
    return value
