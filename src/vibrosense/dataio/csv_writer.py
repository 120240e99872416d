"""CSV writing helpers for exported recordings."""

import csv
from pathlib import Path
from typing import Any, Iterable, Sequence


def write_rows(path: Path, headers: Sequence[str], rows: Iterable[Sequence[Any]]) -> int:
    """
    Write a header row and all data rows to a CSV file.

    Directories are created as needed. Returns the number of data rows written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with path.open("w", newline="", encoding="utf-8") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(headers)
        for row in rows:
            writer.writerow(row)
            count += 1
    return count
