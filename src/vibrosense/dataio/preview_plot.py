"""Static PNG previews of exported recordings (Matplotlib, Agg backend)."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402

from ..core.models import Recording  # noqa: E402


def render_preview(recording: Recording, path: Path) -> Path:
    """Plot one recording's waveform into ``path``."""
    fig, ax = plt.subplots(figsize=(6.0, 1.6), dpi=100)
    try:
        x = np.arange(len(recording))
        ax.plot(x, recording.samples, color="tab:green", linewidth=1.0)
        ax.set_xlim(0, max(1, len(recording) - 1))
        ax.set_ylim(-1.0, 1.0)
        ax.set_title(recording.label(), fontsize=9)
        ax.set_xticks([])
        ax.grid(True, alpha=0.3)
        fig.tight_layout()
        fig.savefig(path)
    finally:
        plt.close(fig)
    return path


def render_previews(recordings: Iterable[Recording], out_dir: Path) -> list[Path]:
    out_dir.mkdir(parents=True, exist_ok=True)
    return [render_preview(rec, out_dir / f"{rec.short_id}.png") for rec in recordings]
