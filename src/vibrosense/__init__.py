"""VibroSense: desktop demo of a wearable vibration sensor.

The :mod:`vibrosense.core` package holds the Qt-free model (signal generator,
recording log, screen state machine); :mod:`vibrosense.gui` renders it with
PySide6 and pyqtgraph.
"""

__version__ = "0.1.0"
