"""Fixed-length sliding window of synthetic sensor samples."""

from __future__ import annotations

from collections.abc import Iterator

import numpy as np

from .ringbuffer import RingBuffer

DEFAULT_WINDOW_SIZE = 300


class SampleWindow:
    """
    Rolling window whose length always equals its capacity.

    The window starts filled with ``fill_value``; every :meth:`push` evicts
    exactly one sample from the front.
    """

    __slots__ = ("_buffer",)

    def __init__(self, capacity: int = DEFAULT_WINDOW_SIZE, fill_value: float = 0.0) -> None:
        self._buffer: RingBuffer[float] = RingBuffer(capacity)
        self._buffer.fill(float(fill_value))

    @property
    def capacity(self) -> int:
        return self._buffer.capacity

    def push(self, value: float) -> float:
        """Append ``value`` and return the evicted (oldest) sample."""
        evicted = self._buffer.append(float(value))
        assert evicted is not None
        return evicted

    def snapshot(self, count: int | None = None) -> np.ndarray:
        """
        Return a copy of the newest ``count`` samples (default: all), oldest first.

        The returned array owns its memory; later pushes never touch it.
        """
        n = self.capacity if count is None else max(0, min(int(count), self.capacity))
        return np.fromiter(self._buffer.tail(n), dtype=np.float64, count=n)

    def __len__(self) -> int:
        return len(self._buffer)

    def __getitem__(self, index: int) -> float:
        return self._buffer[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self._buffer)
