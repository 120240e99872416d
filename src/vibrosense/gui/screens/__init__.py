"""One widget per :class:`~vibrosense.core.navigation.Screen`.

Screens only emit Qt signals for user actions; the main window turns those
into navigation actions and decides which screen is visible.
"""

from .connecting import ConnectingScreen
from .logs import LogsScreen
from .menu import MenuScreen
from .waveform import WaveformScreen
from .welcome import WelcomeScreen

__all__ = [
    "ConnectingScreen",
    "LogsScreen",
    "MenuScreen",
    "WaveformScreen",
    "WelcomeScreen",
]
