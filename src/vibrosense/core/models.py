"""Shared dataclasses for VibroSense recordings and generated samples."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime

import numpy as np


@dataclass(frozen=True)
class GeneratedSample:
    phase: float
    base: float
    jitter: float
    value: float


@dataclass(frozen=True, eq=False)
class Recording:
    """
    Timestamped snapshot of the sample window.

    ``samples`` is a private read-only copy; the constructor copies whatever
    sequence it is given so callers cannot alias the live window.
    """

    timestamp: datetime
    samples: np.ndarray
    recording_id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self) -> None:
        data = np.array(self.samples, dtype=np.float64, copy=True)
        data.setflags(write=False)
        object.__setattr__(self, "samples", data)

    def __len__(self) -> int:
        return int(self.samples.shape[0])

    @property
    def short_id(self) -> str:
        return self.recording_id.hex[:8]

    def label(self) -> str:
        """Title shown on the logs screen, in the local timezone."""
        local = self.timestamp.astimezone()
        return f"Recording: {local.strftime('%b %d, %Y %H:%M:%S')}"
