"""Application session: owns the state and carries out navigation effects."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

import numpy as np

from .config.runtime import VibroConfig
from .core.models import Recording
from .core.navigation import Action, AppState, ConnectTimeout, Effect, ExportFinished, update
from .core.recording_log import RecordingLog, utc_now
from .core.scheduler import CancelHandle, Scheduler
from .core.signal_generator import GeneratorConfig, SignalGenerator
from .dataio.exporter import ExportResult, export_logs
from .haptics import HapticFeedback

logger = logging.getLogger(__name__)

StateListener = Callable[[AppState], None]


class AppSession:
    """
    Single owner of the running application's mutable pieces.

    All changes go through :meth:`dispatch`: the pure
    :func:`~vibrosense.core.navigation.update` computes the next state and the
    effects, and the session executes those effects in order before telling
    listeners about the new state.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        config: VibroConfig | None = None,
        *,
        haptics: HapticFeedback | None = None,
        export_dir: Path | None = None,
        rng: np.random.Generator | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._config = (config or VibroConfig()).sanitized()
        self._scheduler = scheduler
        self._haptics = haptics or HapticFeedback(None)
        self._export_dir = export_dir
        self._clock = clock
        self.generator = SignalGenerator(
            scheduler, GeneratorConfig.from_settings(self._config), rng=rng
        )
        self.log = RecordingLog(self._config.max_recordings, clock=clock)
        self._state = AppState()
        self._connect_handle: CancelHandle | None = None
        self._listeners: list[StateListener] = []
        self.last_export: Optional[ExportResult] = None

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def config(self) -> VibroConfig:
        return self._config

    @property
    def export_dir(self) -> Path | None:
        return self._export_dir

    @export_dir.setter
    def export_dir(self, path: Path | None) -> None:
        self._export_dir = path

    def recordings(self) -> tuple[Recording, ...]:
        return self.log.list()

    def subscribe(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def dispatch(self, action: Action) -> AppState:
        previous = self._state
        state, effects = update(previous, action)
        self._state = state
        if state.screen is not previous.screen:
            logger.info("Screen %s -> %s", previous.screen.value, state.screen.value)
        for effect in effects:
            self._run_effect(effect)
        for listener in list(self._listeners):
            listener(self._state)
        return self._state

    def shutdown(self) -> None:
        """Cancel every pending callback (window closing)."""
        self._cancel_connect()
        self.generator.stop()

    # ---- effects ---------------------------------------------------------

    def _run_effect(self, effect: Effect) -> None:
        if effect is Effect.PLAY_HAPTIC:
            self._haptics.pulse(self._config.haptic_intensity, self._config.haptic_sharpness)
        elif effect is Effect.SCHEDULE_CONNECT:
            self._cancel_connect()
            self._connect_handle = self._scheduler.schedule_after(
                self._config.connect_delay_s, self._on_connect_timeout
            )
        elif effect is Effect.CANCEL_CONNECT:
            self._cancel_connect()
        elif effect is Effect.START_GENERATOR:
            self.generator.start()
        elif effect is Effect.STOP_GENERATOR:
            self.generator.stop()
        elif effect is Effect.SAVE_RECORDING:
            self._save_recording()
        elif effect is Effect.EXPORT_LOGS:
            self._export()

    def _on_connect_timeout(self) -> None:
        self._connect_handle = None
        self.dispatch(ConnectTimeout())

    def _cancel_connect(self) -> None:
        handle, self._connect_handle = self._connect_handle, None
        if handle is not None:
            handle.cancel()

    def _save_recording(self) -> None:
        recording = self.log.capture(self.generator.window)
        self.log.add(recording)
        logger.info(
            "Saved recording %s (%d samples); %d in log",
            recording.short_id,
            len(recording),
            len(self.log),
        )

    def _export(self) -> None:
        if self._export_dir is None:
            logger.info("Export requested but no export directory is configured")
            self.last_export = None
            self._state, _ = update(self._state, ExportFinished())
            return
        try:
            result = export_logs(
                self.log.list(),
                self._export_dir,
                previews=self._config.export_previews,
                clock=self._clock,
            )
        except OSError as exc:
            logger.error("Export failed: %s", exc)
            self.last_export = None
            self._state, _ = update(self._state, ExportFinished(error=str(exc)))
            return
        self.last_export = result
        path = result.data_path if result is not None else None
        self._state, _ = update(self._state, ExportFinished(path=path))
