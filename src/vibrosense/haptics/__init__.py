"""Haptic feedback adapters.

:class:`HapticFeedback` is the only thing the rest of the application talks
to; the engines behind it are interchangeable.
"""

from .engine import HapticEngine, HapticFeedback, LoggingHapticEngine, NullHapticEngine

__all__ = ["HapticEngine", "HapticFeedback", "LoggingHapticEngine", "NullHapticEngine"]
