"""Qt application entry point for the VibroSense desktop GUI.

This module wires up argument parsing and logging, loads the YAML
configuration, builds the :class:`~vibrosense.session.AppSession` on top of a
:class:`~vibrosense.gui.qt_scheduler.QtScheduler`, creates the
:class:`~vibrosense.gui.main_window.MainWindow` and starts the Qt event loop.
All GUI launches, whether through ``python main.py``, the ``vibrosense``
console script or ``python -m vibrosense.gui.application``, flow through
``main()`` here.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Tuple

import numpy as np
from PySide6.QtCore import QLoggingCategory
from PySide6.QtWidgets import QApplication

from ..config.app_config import AppPaths
from ..config.runtime import VibroConfig, load_config
from ..haptics import HapticFeedback, LoggingHapticEngine
from ..session import AppSession
from .main_window import MainWindow
from .qt_scheduler import QtScheduler

LOG_FILE_NAME = "vibrosense.log"
LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


def configure_logging(level: str, log_dir: Path | None) -> None:
    """Send log records to stderr and, when possible, to ``log_dir``."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_dir is not None:
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(log_dir / LOG_FILE_NAME, encoding="utf-8"))
        except OSError as exc:
            print(f"Could not open log file in {log_dir}: {exc}", file=sys.stderr)
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="VibroSense sensor demo")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML file overriding generator/log/haptics settings",
    )
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="INFO",
        help="Logging verbosity (default: INFO)",
    )
    parser.add_argument(
        "--export-dir",
        type=str,
        default=None,
        help="Directory for exported recordings (default: <data root>/exports)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the jitter random generator (reproducible waveforms)",
    )
    return parser


def _parse_cli_args(
    argv: list[str],
) -> tuple[argparse.Namespace, list[str]]:
    parser = _build_arg_parser()
    args, qt_args = parser.parse_known_args(argv[1:])
    qt_argv = [argv[0], *qt_args]
    return args, qt_argv


def create_app(
    argv: list[str] | None = None,
    *,
    config: VibroConfig | None = None,
    export_dir: Path | None = None,
    seed: int | None = None,
) -> Tuple[QApplication, MainWindow]:
    """
    Create the QApplication and main VibroSense window.

    Returns
    -------
    app:
        The QApplication instance (owned by caller).
    window:
        The main window, already bound to a fresh session.
    """
    qt_args = argv if argv is not None else sys.argv
    app = QApplication.instance() or QApplication(qt_args)

    # Suppress noisy QObject::connect warnings from QStyleHints and similar internals
    QLoggingCategory.setFilterRules("qt.core.qobject.connect=false")

    scheduler = QtScheduler(app)
    session = AppSession(
        scheduler,
        config,
        haptics=HapticFeedback(LoggingHapticEngine()),
        export_dir=export_dir,
        rng=np.random.default_rng(seed),
    )
    window = MainWindow(session)
    return app, window


def main(argv: list[str] | None = None) -> None:
    raw_argv = argv if argv is not None else sys.argv
    args, qt_argv = _parse_cli_args(raw_argv)

    paths = AppPaths()
    configure_logging(args.log_level, paths.logs)
    try:
        paths.ensure()
    except OSError as exc:
        logging.getLogger(__name__).warning(
            "Could not create data folders under %s: %s", paths.data_root, exc
        )
    config = load_config(args.config)
    export_dir = Path(args.export_dir).expanduser() if args.export_dir else paths.exports

    logging.getLogger(__name__).info(
        "Starting VibroSense (window=%d, tick=%.0f ms, keep=%d)",
        config.window_size,
        config.tick_interval_ms,
        config.max_recordings,
    )
    app, win = create_app(qt_argv, config=config, export_dir=export_dir, seed=args.seed)
    win.resize(420, 720)
    win.show()
    raise SystemExit(app.exec())


if __name__ == "__main__":
    main()
