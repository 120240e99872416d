from __future__ import annotations

from PySide6.QtCore import Qt, QTimer, Signal, Slot
from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

from ...core.signal_generator import SignalGenerator
from ..styles import styled_button
from ..widgets import WaveformPlot


class WaveformScreen(QWidget):
    """
    Live view of the generator's sample window.

    The plot is redrawn from its own timer while the screen is active; it
    only reads the window and never drives the generator.
    """

    end_requested = Signal()

    def __init__(
        self,
        generator: SignalGenerator,
        refresh_ms: int = 30,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._generator = generator

        layout = QVBoxLayout(self)
        layout.setSpacing(20)
        layout.addStretch(1)

        title = QLabel(self.tr("Live Sensor Data"), self)
        title.setProperty("role", "title")
        title.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)

        self.plot = WaveformPlot(color="b", height=100, parent=self)
        layout.addWidget(self.plot)

        self.end_button = styled_button(self.tr("End & Save Recording"), "primary", self)
        self.end_button.clicked.connect(self.end_requested)
        layout.addWidget(self.end_button, alignment=Qt.AlignHCenter)
        layout.addStretch(1)

        self._timer = QTimer(self)
        self._timer.setInterval(max(1, int(refresh_ms)))
        self._timer.timeout.connect(self._redraw)

    def set_active(self, active: bool) -> None:
        if active:
            self._redraw()
            self._timer.start()
        else:
            self._timer.stop()

    @Slot()
    def _redraw(self) -> None:
        self.plot.set_samples(self._generator.window.snapshot())
