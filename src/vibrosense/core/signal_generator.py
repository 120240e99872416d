"""Synthetic vibration signal: a slow sine with periodic noisy bursts."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any

import numpy as np

from .models import GeneratedSample
from .sample_window import DEFAULT_WINDOW_SIZE, SampleWindow
from .scheduler import CancelHandle, Scheduler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratorConfig:
    """
    Shape of the synthetic waveform.

    A tick lands in a "burst" when ``floor(phase) % burst_cycle`` exceeds
    ``burst_threshold``; bursts use ``burst_jitter`` as the noise bound,
    everything else ``baseline_jitter``.
    """

    window_size: int = DEFAULT_WINDOW_SIZE
    tick_interval_s: float = 0.03
    phase_step: float = 0.2
    amplitude: float = 0.2
    burst_cycle: int = 100
    burst_threshold: int = 80
    burst_jitter: float = 0.5
    baseline_jitter: float = 0.05

    @classmethod
    def from_settings(cls, settings: Any) -> "GeneratorConfig":
        """Build from any object exposing the ``VibroConfig`` generator fields."""
        return cls(
            window_size=int(settings.window_size),
            tick_interval_s=float(settings.tick_interval_ms) / 1000.0,
            phase_step=float(settings.phase_step),
            amplitude=float(settings.amplitude),
            burst_cycle=int(settings.burst_cycle),
            burst_threshold=int(settings.burst_threshold),
            burst_jitter=float(settings.burst_jitter),
            baseline_jitter=float(settings.baseline_jitter),
        )

    def in_burst(self, phase: float) -> bool:
        return math.floor(phase) % self.burst_cycle > self.burst_threshold

    def jitter_bound(self, phase: float) -> float:
        return self.burst_jitter if self.in_burst(phase) else self.baseline_jitter


class SignalGenerator:
    """
    Owns a :class:`SampleWindow` and feeds it one sample per tick.

    Ticks are driven by a :class:`~vibrosense.core.scheduler.Scheduler`; the
    generator keeps the single periodic handle and cancels it on
    :meth:`stop` or before a restart.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        config: GeneratorConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._config = config or GeneratorConfig()
        self._rng = rng if rng is not None else np.random.default_rng()
        self._window = SampleWindow(self._config.window_size)
        self._phase = 0.0
        self._handle: CancelHandle | None = None
        self._tick_count = 0

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    @property
    def window(self) -> SampleWindow:
        return self._window

    @property
    def phase(self) -> float:
        return self._phase

    @property
    def tick_count(self) -> int:
        """Ticks since the last :meth:`start`."""
        return self._tick_count

    @property
    def running(self) -> bool:
        return self._handle is not None

    def start(self) -> None:
        if self.running:
            logger.debug("Generator already running; restarting")
            self.stop()
        self._phase = 0.0
        self._tick_count = 0
        self._handle = self._scheduler.schedule_every(
            self._config.tick_interval_s, self._on_timer
        )
        logger.info(
            "Signal generator started (%.0f ms period, %d-sample window)",
            self._config.tick_interval_s * 1000.0,
            self._config.window_size,
        )

    def stop(self) -> None:
        handle, self._handle = self._handle, None
        if handle is None:
            return
        handle.cancel()
        logger.info("Signal generator stopped after %d ticks", self._tick_count)

    def tick(self) -> GeneratedSample:
        """Advance the phase, synthesise one sample and push it into the window."""
        cfg = self._config
        self._phase += cfg.phase_step
        phase = self._phase
        base = cfg.amplitude * math.sin(phase)
        bound = cfg.jitter_bound(phase)
        jitter = float(self._rng.uniform(-bound, bound))
        value = base + jitter
        self._window.push(value)
        self._tick_count += 1
        return GeneratedSample(phase=phase, base=base, jitter=jitter, value=value)

    def _on_timer(self) -> None:
        self.tick()
