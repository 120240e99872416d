"""Qt-free model of the simulated sensor.

The generator fills a fixed-length :class:`SampleWindow`, the
:class:`RecordingLog` keeps snapshots of it, and :mod:`navigation` decides
which screen is showing and which side effects a user action triggers.
"""

# Data structures
from .ringbuffer import RingBuffer
from .sample_window import DEFAULT_WINDOW_SIZE, SampleWindow
from .models import GeneratedSample, Recording

# Behaviour
from .scheduler import ManualScheduler, Scheduler
from .signal_generator import GeneratorConfig, SignalGenerator
from .recording_log import DEFAULT_MAX_RECORDINGS, RecordingLog
from .navigation import AppState, Effect, Screen, update

__all__ = [
    "RingBuffer",
    "DEFAULT_WINDOW_SIZE",
    "SampleWindow",
    "GeneratedSample",
    "Recording",
    "ManualScheduler",
    "Scheduler",
    "GeneratorConfig",
    "SignalGenerator",
    "DEFAULT_MAX_RECORDINGS",
    "RecordingLog",
    "AppState",
    "Effect",
    "Screen",
    "update",
]
