"""Screen state machine.

:func:`update` is a pure function: given the current :class:`AppState` and a
user or timer action it returns the next state together with the effects the
session has to carry out. Effects are executed in order, which is what makes
"stop the generator" happen before "capture the recording".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)


class Screen(Enum):
    WELCOME = "welcome"
    MENU = "menu"
    CONNECTING = "connecting"
    WAVEFORM = "waveform"
    LOGS = "logs"


@dataclass(frozen=True)
class AppState:
    screen: Screen = Screen.WELCOME
    connect_pending: bool = False
    last_export: Optional[Path] = None
    last_export_error: Optional[str] = None


# ---- Actions ------------------------------------------------------------


@dataclass(frozen=True)
class Begin:
    pass


@dataclass(frozen=True)
class CaptureNew:
    pass


@dataclass(frozen=True)
class ConnectTimeout:
    pass


@dataclass(frozen=True)
class CancelConnect:
    pass


@dataclass(frozen=True)
class EndAndSave:
    pass


@dataclass(frozen=True)
class ViewLogs:
    pass


@dataclass(frozen=True)
class BackToMenu:
    pass


@dataclass(frozen=True)
class ExportLogs:
    pass


@dataclass(frozen=True)
class ExportFinished:
    """Reported back by the session once an export attempt completes."""

    path: Optional[Path] = None
    error: Optional[str] = None


Action = Union[
    Begin,
    CaptureNew,
    ConnectTimeout,
    CancelConnect,
    EndAndSave,
    ViewLogs,
    BackToMenu,
    ExportLogs,
    ExportFinished,
]


# ---- Effects ------------------------------------------------------------


class Effect(Enum):
    PLAY_HAPTIC = "play_haptic"
    SCHEDULE_CONNECT = "schedule_connect"
    CANCEL_CONNECT = "cancel_connect"
    START_GENERATOR = "start_generator"
    STOP_GENERATOR = "stop_generator"
    SAVE_RECORDING = "save_recording"
    EXPORT_LOGS = "export_logs"


Transition = tuple[AppState, tuple[Effect, ...]]


def update(state: AppState, action: Action) -> Transition:
    """Return ``(next_state, effects)`` for ``action`` applied to ``state``."""
    screen = state.screen

    if isinstance(action, ExportFinished):
        # Result bookkeeping only; never changes the screen.
        return replace(state, last_export=action.path, last_export_error=action.error), ()

    if screen is Screen.WELCOME and isinstance(action, Begin):
        return replace(state, screen=Screen.MENU), ()

    if screen is Screen.MENU:
        if isinstance(action, CaptureNew):
            return (
                replace(state, screen=Screen.CONNECTING, connect_pending=True),
                (Effect.PLAY_HAPTIC, Effect.SCHEDULE_CONNECT),
            )
        if isinstance(action, ViewLogs):
            return replace(state, screen=Screen.LOGS), ()
        if isinstance(action, ExportLogs):
            return state, (Effect.EXPORT_LOGS,)

    if screen is Screen.CONNECTING:
        if isinstance(action, ConnectTimeout):
            return (
                replace(state, screen=Screen.WAVEFORM, connect_pending=False),
                (Effect.START_GENERATOR,),
            )
        if isinstance(action, CancelConnect):
            return (
                replace(state, screen=Screen.MENU, connect_pending=False),
                (Effect.CANCEL_CONNECT,),
            )

    if screen is Screen.WAVEFORM and isinstance(action, EndAndSave):
        return (
            replace(state, screen=Screen.MENU),
            (Effect.STOP_GENERATOR, Effect.SAVE_RECORDING),
        )

    if screen is Screen.LOGS and isinstance(action, BackToMenu):
        return replace(state, screen=Screen.MENU), ()

    logger.debug("Ignoring %s on %s screen", type(action).__name__, screen.value)
    return state, ()
