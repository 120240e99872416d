import pytest

from vibrosense.core.ringbuffer import RingBuffer


def test_append_returns_evicted_item_once_full() -> None:
    buf: RingBuffer[int] = RingBuffer(3)
    assert buf.append(1) is None
    assert buf.append(2) is None
    assert buf.append(3) is None
    assert len(buf) == 3
    assert buf.append(4) == 1
    assert list(buf) == [2, 3, 4]
    assert buf[0] == 2
    assert buf[-1] == 4


def test_fill_and_tail() -> None:
    buf: RingBuffer[float] = RingBuffer(4)
    buf.fill(0.0)
    assert len(buf) == 4
    buf.append(1.0)
    buf.append(2.0)
    assert buf.tail(3) == [0.0, 1.0, 2.0]
    assert buf.tail(0) == []
    assert buf.tail(10) == [0.0, 0.0, 1.0, 2.0]


def test_rejects_non_positive_capacity() -> None:
    with pytest.raises(ValueError):
        RingBuffer(0)


def test_index_out_of_range() -> None:
    buf: RingBuffer[int] = RingBuffer(2)
    with pytest.raises(IndexError):
        buf[0]
    buf.append(5)
    with pytest.raises(IndexError):
        buf[1]
