"""Configuration objects and helpers for VibroSense.

:mod:`runtime` loads the optional YAML file that tunes the synthetic signal,
the recording log and haptics; :mod:`app_config` resolves where exports and
log files are written.
"""

from .app_config import AppPaths
from .runtime import VibroConfig, config_from_mapping, load_config

__all__ = ["AppPaths", "VibroConfig", "config_from_mapping", "load_config"]
