"""Export the in-memory recording log to CSV with a JSON sidecar."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Iterator, Sequence

from ..core.models import Recording
from . import csv_writer
from .file_paths import build_export_paths

logger = logging.getLogger(__name__)

EXPORT_HEADERS = ("recording_id", "timestamp", "index", "value")


@dataclass(frozen=True)
class ExportResult:
    data_path: Path
    meta_path: Path
    rows_written: int
    recording_count: int
    preview_paths: tuple[Path, ...] = field(default_factory=tuple)


def _iter_rows(recordings: Sequence[Recording]) -> Iterator[tuple[str, str, int, float]]:
    for rec in recordings:
        rec_id = str(rec.recording_id)
        stamp = rec.timestamp.isoformat()
        for idx, value in enumerate(rec.samples):
            yield rec_id, stamp, idx, float(value)


def _build_meta(recordings: Sequence[Recording], exported_at: datetime) -> dict:
    return {
        "exported_at": exported_at.isoformat(),
        "count": len(recordings),
        "capacity": max((len(rec) for rec in recordings), default=0),
        "columns": list(EXPORT_HEADERS),
        "recordings": [
            {
                "recording_id": str(rec.recording_id),
                "timestamp": rec.timestamp.isoformat(),
                "samples": len(rec),
            }
            for rec in recordings
        ],
    }


def export_logs(
    recordings: Sequence[Recording],
    out_dir: Path,
    *,
    previews: bool = False,
    clock: Callable[[], datetime] | None = None,
) -> ExportResult | None:
    """
    Write ``recordings`` (newest first) to ``out_dir``.

    Returns ``None`` when there is nothing to export. File system errors
    propagate as :class:`OSError`.
    """
    recordings = list(recordings)
    if not recordings:
        logger.info("No recordings to export")
        return None

    exported_at = clock() if clock is not None else datetime.now(timezone.utc)
    paths = build_export_paths(Path(out_dir), exported_at)

    rows = csv_writer.write_rows(paths.data_path, EXPORT_HEADERS, _iter_rows(recordings))
    with paths.meta_path.open("w", encoding="utf-8") as fh:
        json.dump(_build_meta(recordings, exported_at), fh, indent=2)

    preview_paths: tuple[Path, ...] = ()
    if previews:
        from .preview_plot import render_previews

        preview_paths = tuple(render_previews(recordings, paths.preview_dir))

    logger.info(
        "Exported %d recording(s), %d rows, to %s", len(recordings), rows, paths.data_path
    )
    return ExportResult(
        data_path=paths.data_path,
        meta_path=paths.meta_path,
        rows_written=rows,
        recording_count=len(recordings),
        preview_paths=preview_paths,
    )
