"""Runtime configuration for the signal generator, recording log and haptics."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml


@dataclass(slots=True)
class VibroConfig:
    """
    Tuning knobs for the simulated sensor.

    The defaults reproduce the demo device: a 300-sample window refreshed
    every 30 ms, a 2 s fake connection and the last five recordings kept.
    """

    window_size: int = 300
    tick_interval_ms: float = 30.0
    phase_step: float = 0.2
    amplitude: float = 0.2
    burst_cycle: int = 100
    burst_threshold: int = 80
    burst_jitter: float = 0.5
    baseline_jitter: float = 0.05

    connect_delay_s: float = 2.0
    max_recordings: int = 5

    haptic_intensity: float = 1.0
    haptic_sharpness: float = 1.0

    export_previews: bool = False

    def sanitized(self) -> VibroConfig:
        """Return a copy with derived limits applied."""
        burst_cycle = max(1, int(self.burst_cycle))
        return VibroConfig(
            window_size=max(2, int(self.window_size)),
            tick_interval_ms=max(1.0, float(self.tick_interval_ms)),
            phase_step=float(self.phase_step),
            amplitude=float(self.amplitude),
            burst_cycle=burst_cycle,
            burst_threshold=min(max(0, int(self.burst_threshold)), burst_cycle),
            burst_jitter=abs(float(self.burst_jitter)),
            baseline_jitter=abs(float(self.baseline_jitter)),
            connect_delay_s=max(0.0, float(self.connect_delay_s)),
            max_recordings=max(1, int(self.max_recordings)),
            haptic_intensity=max(0.0, min(1.0, float(self.haptic_intensity))),
            haptic_sharpness=max(0.0, min(1.0, float(self.haptic_sharpness))),
            export_previews=bool(self.export_previews),
        )


def _recognized_fields() -> set[str]:
    """Settings keys that map onto a :class:`VibroConfig` attribute."""
    return {f.name for f in fields(VibroConfig)}


def _normalize_mapping(data: Mapping[str, Any]) -> MutableMapping[str, Any]:
    """Flatten the optional ``generator``/``haptics`` sub-blocks."""
    merged: MutableMapping[str, Any] = {}
    for key, value in data.items():
        if key in {"generator", "haptics"} and isinstance(value, Mapping):
            merged.update(value)
        else:
            merged[key] = value
    return merged


def config_from_mapping(data: Mapping[str, Any] | None) -> VibroConfig:
    """
    Turn a parsed settings document into a sanitized :class:`VibroConfig`.

    Generator and haptics keys may sit at the top level or inside their
    ``generator:``/``haptics:`` blocks; keys VibroSense does not know are dropped.
    """
    if not data:
        return VibroConfig()
    normalized = _normalize_mapping(data)
    known = _recognized_fields()
    payload = {key: normalized[key] for key in normalized.keys() & known}
    return VibroConfig(**payload).sanitized()


def load_config(path: str | Path | None) -> VibroConfig:
    """
    Read the sensor demo settings from the YAML file at ``path``.

    With no path, or a path that is not an existing file, the demo defaults are
    used. A document that is not a mapping raises :class:`ValueError`.
    """
    cfg_path = Path(path) if path is not None else None
    if cfg_path is None or not cfg_path.is_file():
        return VibroConfig()
    with cfg_path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh) or {}
    if not isinstance(raw, Mapping):
        raise ValueError(f"Expected mapping in {cfg_path}, got {type(raw).__name__}")
    return config_from_mapping(raw)


__all__ = ["VibroConfig", "config_from_mapping", "load_config"]
