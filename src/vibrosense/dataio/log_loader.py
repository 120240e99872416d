"""Utilities for reading exported recording CSV files back in."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Dict, List

import numpy as np

from .exporter import EXPORT_HEADERS


def load_export(path: Path) -> Dict[str, np.ndarray]:
    """
    Load an export CSV into ``{recording_id: samples}``.

    Recordings keep the order they appear in the file (newest first). Rows
    are placed by their ``index`` column, so row order within a recording
    does not matter.
    """
    grouped: Dict[str, List[tuple[int, float]]] = {}
    with Path(path).open("r", newline="", encoding="utf-8") as fh:
        reader = csv.DictReader(fh)
        missing = set(EXPORT_HEADERS) - set(reader.fieldnames or ())
        if missing:
            raise ValueError(f"{path} is missing columns: {sorted(missing)}")
        for row in reader:
            grouped.setdefault(row["recording_id"], []).append(
                (int(row["index"]), float(row["value"]))
            )

    result: Dict[str, np.ndarray] = {}
    for rec_id, pairs in grouped.items():
        pairs.sort()
        result[rec_id] = np.fromiter((v for _, v in pairs), dtype=np.float64, count=len(pairs))
    return result
