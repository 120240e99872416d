"""Scheduler implementation backed by ``QTimer``."""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Qt, QTimer

from ..core.scheduler import Callback

logger = logging.getLogger(__name__)


class QtTimerHandle:
    """Cancellation handle owning one ``QTimer``."""

    def __init__(self, timer: QTimer) -> None:
        self._timer: QTimer | None = timer

    @property
    def active(self) -> bool:
        return self._timer is not None and self._timer.isActive()

    def cancel(self) -> None:
        timer, self._timer = self._timer, None
        if timer is None:
            return
        timer.stop()
        timer.deleteLater()


class QtScheduler(QObject):
    """Run callbacks from the Qt event loop (GUI thread only)."""

    def schedule_every(self, period_s: float, callback: Callback) -> QtTimerHandle:
        interval_ms = int(round(float(period_s) * 1000.0))
        if interval_ms <= 0:
            raise ValueError(f"period must be positive, got {period_s!r}")
        timer = QTimer(self)
        timer.setTimerType(Qt.PreciseTimer)
        timer.setInterval(interval_ms)
        timer.timeout.connect(callback)
        timer.start()
        return QtTimerHandle(timer)

    def schedule_after(self, delay_s: float, callback: Callback) -> QtTimerHandle:
        delay_ms = int(round(float(delay_s) * 1000.0))
        if delay_ms < 0:
            raise ValueError(f"delay must be non-negative, got {delay_s!r}")
        timer = QTimer(self)
        timer.setSingleShot(True)
        timer.setInterval(delay_ms)
        handle = QtTimerHandle(timer)

        def _fire() -> None:
            handle.cancel()
            callback()

        timer.timeout.connect(_fire)
        timer.start()
        logger.debug("Deferred callback scheduled in %d ms", delay_ms)
        return handle
