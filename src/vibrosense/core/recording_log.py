"""Bounded, newest-first log of captured recordings."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator
from datetime import datetime, timezone
from typing import Callable

from .models import Recording
from .sample_window import SampleWindow

logger = logging.getLogger(__name__)

DEFAULT_MAX_RECORDINGS = 5


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class RecordingLog:
    """
    In-memory history of the last few recordings.

    ``list()`` is ordered newest first; once more than ``max_entries``
    recordings have been added the oldest one is dropped.
    """

    def __init__(
        self,
        max_entries: int = DEFAULT_MAX_RECORDINGS,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        if max_entries <= 0:
            raise ValueError("max_entries must be positive")
        self._max_entries = int(max_entries)
        self._clock = clock
        self._entries: deque[Recording] = deque()

    @property
    def max_entries(self) -> int:
        return self._max_entries

    def capture(self, window: SampleWindow) -> Recording:
        """Snapshot ``window`` into a new :class:`Recording` (not added)."""
        return Recording(
            timestamp=self._clock(),
            samples=window.snapshot(window.capacity),
        )

    def add(self, recording: Recording) -> None:
        self._entries.appendleft(recording)
        if len(self._entries) > self._max_entries:
            evicted = self._entries.pop()
            logger.debug("Recording log full; evicted %s", evicted.short_id)

    def list(self) -> tuple[Recording, ...]:
        return tuple(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Recording]:
        return iter(tuple(self._entries))
