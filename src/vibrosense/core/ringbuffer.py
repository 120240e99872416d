from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class RingBuffer(Generic[T]):
    """
    Fixed-size ring buffer.
    Once full, every append overwrites the oldest entry.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._data: list[T | None] = [None] * capacity
        self._start = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def append(self, item: T) -> T | None:
        """Append ``item`` and return the evicted entry, if any."""
        idx = (self._start + self._size) % self._capacity
        evicted: T | None = None
        if self._size < self._capacity:
            self._size += 1
        else:
            evicted = self._data[idx]
            self._start = (self._start + 1) % self._capacity
        self._data[idx] = item
        return evicted

    def fill(self, item: T) -> None:
        """Reset the buffer to ``capacity`` copies of ``item``."""
        self._data = [item] * self._capacity
        self._start = 0
        self._size = self._capacity

    def clear(self) -> None:
        self._data = [None] * self._capacity
        self._start = 0
        self._size = 0

    def __len__(self) -> int:  # pragma: no cover - trivial
        return self._size

    def __getitem__(self, index: int) -> T:
        """Support buf[i] and buf[-1] indexing over the *logical* contents."""
        size = self._size
        if size == 0:
            raise IndexError("RingBuffer is empty")

        if index < 0:
            index += size

        if index < 0 or index >= size:
            raise IndexError("RingBuffer index out of range")

        item = self._data[(self._start + index) % self._capacity]
        assert item is not None
        return item

    def __iter__(self) -> Iterator[T]:
        for i in range(self._size):
            item = self._data[(self._start + i) % self._capacity]
            if item is not None:
                yield item

    def tail(self, count: int) -> list[T]:
        """Return the newest ``count`` entries, oldest first."""
        if count <= 0:
            return []
        items = list(self)
        return items[-count:]
