"""Main window for the VibroSense GUI."""

from __future__ import annotations

from PySide6.QtCore import Slot
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QMainWindow, QStackedWidget, QWidget

from ..core.navigation import (
    AppState,
    BackToMenu,
    Begin,
    CancelConnect,
    CaptureNew,
    EndAndSave,
    ExportLogs,
    Screen,
    ViewLogs,
)
from ..session import AppSession
from .screens import (
    ConnectingScreen,
    LogsScreen,
    MenuScreen,
    WaveformScreen,
    WelcomeScreen,
)
from .styles import apply_styles


class MainWindow(QMainWindow):
    """
    Stack of the five screens, always showing the one named by the session state.

    Buttons dispatch navigation actions to the :class:`AppSession`; the
    session notifies :meth:`render` after every transition.
    """

    def __init__(self, session: AppSession) -> None:
        super().__init__()
        self.setWindowTitle("VibroSense")
        self._session = session
        self._stack = QStackedWidget()
        self._pages: dict[Screen, QWidget] = {}

        self._build_screens()
        apply_styles(self)

        session.subscribe(self.render)
        self.render(session.state)

    def closeEvent(self, event: QCloseEvent) -> None:
        self.waveform_screen.set_active(False)
        self._session.shutdown()
        super().closeEvent(event)

    def _build_screens(self) -> None:
        tick_ms = int(round(self._session.generator.config.tick_interval_s * 1000.0))
        self.welcome_screen = WelcomeScreen()
        self.menu_screen = MenuScreen()
        self.connecting_screen = ConnectingScreen()
        self.waveform_screen = WaveformScreen(self._session.generator, refresh_ms=tick_ms)
        self.logs_screen = LogsScreen()

        self.welcome_screen.begin_requested.connect(lambda: self._session.dispatch(Begin()))
        self.menu_screen.capture_requested.connect(
            lambda: self._session.dispatch(CaptureNew())
        )
        self.menu_screen.view_logs_requested.connect(
            lambda: self._session.dispatch(ViewLogs())
        )
        self.menu_screen.export_requested.connect(self._on_export_requested)
        self.connecting_screen.cancel_requested.connect(
            lambda: self._session.dispatch(CancelConnect())
        )
        self.waveform_screen.end_requested.connect(
            lambda: self._session.dispatch(EndAndSave())
        )
        self.logs_screen.back_requested.connect(
            lambda: self._session.dispatch(BackToMenu())
        )

        self._pages = {
            Screen.WELCOME: self.welcome_screen,
            Screen.MENU: self.menu_screen,
            Screen.CONNECTING: self.connecting_screen,
            Screen.WAVEFORM: self.waveform_screen,
            Screen.LOGS: self.logs_screen,
        }
        for page in self._pages.values():
            page.setObjectName("rootPage")
            self._stack.addWidget(page)
        self.setCentralWidget(self._stack)

    def render(self, state: AppState) -> None:
        """Show the page for ``state.screen`` and refresh what it displays."""
        recordings = self._session.recordings()
        self.menu_screen.set_recording_count(len(recordings))
        if state.screen is Screen.LOGS:
            self.logs_screen.set_recordings(recordings)
        self.waveform_screen.set_active(state.screen is Screen.WAVEFORM)
        self._stack.setCurrentWidget(self._pages[state.screen])

    @Slot()
    def _on_export_requested(self) -> None:
        state = self._session.dispatch(ExportLogs())
        if state.last_export_error:
            self.statusBar().showMessage(
                self.tr("Export failed: %s") % state.last_export_error, 8000
            )
        elif state.last_export is not None:
            self.statusBar().showMessage(
                self.tr("Exported recordings to %s") % state.last_export, 8000
            )
        else:
            self.statusBar().showMessage(self.tr("Nothing was exported."), 5000)
