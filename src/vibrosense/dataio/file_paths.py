"""Helpers for constructing export file paths."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

# Allow only alphanumerics, underscore, dot, and dash.
_NAME_RE = re.compile(r"[^A-Za-z0-9_.-]+")


def sanitize_name(name: str, fallback: str = "recordings") -> str:
    """
    Sanitize a user-provided name for use in a file name.

    - Replace disallowed characters with '_'.
    - Strip leading/trailing underscores.
    - Fall back to ``fallback`` if nothing remains.
    """
    cleaned = _NAME_RE.sub("_", name).strip("_")
    return cleaned or fallback


@dataclass(frozen=True)
class ExportPaths:
    """Data CSV, its ``.meta.json`` sidecar and the preview image directory."""

    data_path: Path
    meta_path: Path
    preview_dir: Path


def build_export_paths(out_dir: Path, when: datetime, name: str = "recordings") -> ExportPaths:
    """
    Return the file names used by one export.

    Example: ``out_dir/recordings_20251204_153045.csv``. If a file with that
    name already exists a ``_1``, ``_2``... suffix is added so earlier exports
    from the same second are kept.
    """
    base = f"{sanitize_name(name)}_{when.strftime('%Y%m%d_%H%M%S')}"
    stem = base
    counter = 0
    while (Path(out_dir) / f"{stem}.csv").exists():
        counter += 1
        stem = f"{base}_{counter}"
    data_path = Path(out_dir) / f"{stem}.csv"
    return ExportPaths(
        data_path=data_path,
        meta_path=data_path.with_suffix(data_path.suffix + ".meta.json"),
        preview_dir=Path(out_dir) / f"{stem}_previews",
    )
