"""Haptic pulse engines.

Desktop machines rarely have a vibration motor, so the default engine logs the
pulse and rings the platform bell. Every engine failure is reported through
:class:`HapticFeedback`, which logs and swallows it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

logger = logging.getLogger(__name__)


def _clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


class HapticEngine(Protocol):
    def start(self) -> None: ...

    def play_pulse(self, intensity: float, sharpness: float) -> None: ...


@dataclass
class NullHapticEngine:
    """Engine that only remembers the pulses it was asked to play."""

    pulses: list[tuple[float, float]] = field(default_factory=list)
    started: bool = False

    def start(self) -> None:
        self.started = True

    def play_pulse(self, intensity: float, sharpness: float) -> None:
        self.pulses.append((intensity, sharpness))


class LoggingHapticEngine:
    """Log each pulse and beep when a Qt application is running."""

    def start(self) -> None:
        logger.debug("Logging haptic engine ready")

    def play_pulse(self, intensity: float, sharpness: float) -> None:
        logger.info("Haptic pulse: intensity=%.2f sharpness=%.2f", intensity, sharpness)
        try:
            from PySide6.QtWidgets import QApplication
        except ImportError as exc:
            raise RuntimeError("Qt is not available for audible feedback") from exc
        if QApplication.instance() is not None:
            QApplication.beep()


class HapticFeedback:
    """
    Fire-and-forget wrapper around a :class:`HapticEngine`.

    The engine is started lazily on the first pulse. If starting fails the
    wrapper stays disabled for the rest of the session; a failed pulse is
    logged and otherwise ignored.
    """

    def __init__(self, engine: HapticEngine | None) -> None:
        self._engine = engine
        self._started = False
        self._disabled = engine is None

    @property
    def available(self) -> bool:
        return not self._disabled

    def prepare(self) -> bool:
        """Start the engine if needed. Returns ``True`` when it is usable."""
        if self._disabled:
            return False
        if self._started:
            return True
        assert self._engine is not None
        try:
            self._engine.start()
        except Exception as exc:
            logger.warning("Haptic engine error: %s", exc)
            self._disabled = True
            return False
        self._started = True
        return True

    def pulse(self, intensity: float = 1.0, sharpness: float = 1.0) -> bool:
        """Play one transient pulse. Returns ``True`` if it was delivered."""
        if not self.prepare():
            return False
        assert self._engine is not None
        try:
            self._engine.play_pulse(_clamp_unit(intensity), _clamp_unit(sharpness))
        except Exception as exc:
            logger.warning("Haptic error: %s", exc)
            return False
        return True
