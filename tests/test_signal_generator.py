from __future__ import annotations

import math

import numpy as np
import pytest

from vibrosense.core.recording_log import RecordingLog
from vibrosense.core.scheduler import ManualScheduler
from vibrosense.core.signal_generator import GeneratorConfig, SignalGenerator


def _generator(seed: int = 0) -> tuple[SignalGenerator, ManualScheduler]:
    scheduler = ManualScheduler()
    return SignalGenerator(scheduler, rng=np.random.default_rng(seed)), scheduler


def test_window_length_is_invariant_across_ticks() -> None:
    gen, _ = _generator()
    assert len(gen.window) == 300
    for _ in range(700):
        gen.tick()
        assert len(gen.window) == 300


def test_jitter_bound_follows_burst_condition() -> None:
    gen, _ = _generator(seed=7)
    cfg = gen.config
    burst_jitters: list[float] = []
    for _ in range(1000):
        sample = gen.tick()
        in_burst = math.floor(sample.phase) % 100 > 80
        assert in_burst == cfg.in_burst(sample.phase)
        bound = 0.5 if in_burst else 0.05
        assert abs(sample.jitter) <= bound
        assert sample.base == pytest.approx(0.2 * math.sin(sample.phase))
        assert sample.value == pytest.approx(sample.base + sample.jitter)
        if in_burst:
            burst_jitters.append(abs(sample.jitter))

    # phase reaches 81 after ~405 ticks, so 1000 ticks cover one burst window
    assert burst_jitters
    assert max(burst_jitters) > 0.05


def test_start_resets_phase_and_drives_ticks_from_scheduler() -> None:
    gen, scheduler = _generator()
    for _ in range(5):
        gen.tick()
    assert gen.phase == pytest.approx(1.0)

    gen.start()
    assert gen.running
    assert gen.phase == 0.0

    scheduler.advance(0.09)
    assert gen.tick_count == 3
    assert gen.phase == pytest.approx(0.6)


def test_start_twice_keeps_a_single_timer() -> None:
    gen, scheduler = _generator()
    gen.start()
    scheduler.advance(0.06)
    gen.start()
    assert scheduler.pending() == 1
    assert gen.tick_count == 0

    scheduler.advance(0.03)
    assert gen.tick_count == 1


def test_stop_halts_ticks_and_is_safe_when_idle() -> None:
    gen, scheduler = _generator()
    gen.stop()
    assert not gen.running

    gen.start()
    scheduler.advance(0.3)
    gen.stop()
    ticks = gen.tick_count
    before = gen.window.snapshot()

    scheduler.advance(1.0)
    gen.stop()
    assert gen.tick_count == ticks
    np.testing.assert_array_equal(gen.window.snapshot(), before)


def test_three_hundred_ticks_then_capture_matches_formula() -> None:
    seed = 2024
    gen, scheduler = _generator(seed)
    gen.start()
    scheduler.advance(9.0)
    gen.stop()
    assert gen.tick_count == 300

    recording = RecordingLog().capture(gen.window)
    assert len(recording.samples) == 300

    twin = np.random.default_rng(seed)
    phase = 0.0
    expected = []
    for _ in range(300):
        phase += 0.2
        bound = 0.5 if math.floor(phase) % 100 > 80 else 0.05
        jitter = twin.uniform(-bound, bound)
        expected.append(0.2 * math.sin(phase) + jitter)

    assert recording.samples[-1] == pytest.approx(expected[-1], abs=1e-12)
    np.testing.assert_allclose(recording.samples, expected, atol=1e-12)


def test_custom_config_changes_shape() -> None:
    cfg = GeneratorConfig(window_size=10, amplitude=1.0, baseline_jitter=0.0, burst_jitter=0.0)
    gen = SignalGenerator(ManualScheduler(), cfg, rng=np.random.default_rng(1))
    sample = gen.tick()
    assert len(gen.window) == 10
    assert sample.jitter == 0.0
    assert sample.value == pytest.approx(math.sin(0.2))
