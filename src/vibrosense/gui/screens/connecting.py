from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QLabel, QProgressBar, QVBoxLayout, QWidget

from ..styles import styled_button


class ConnectingScreen(QWidget):
    """Shown while the fake sensor connection is pending."""

    cancel_requested = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.addStretch(1)

        label = QLabel(self.tr("Connecting to sensor..."), self)
        label.setAlignment(Qt.AlignCenter)
        label.setProperty("role", "title")
        layout.addWidget(label)

        # Zero range turns the bar into a busy indicator.
        self.progress = QProgressBar(self)
        self.progress.setRange(0, 0)
        self.progress.setTextVisible(False)
        self.progress.setMaximumWidth(250)
        layout.addWidget(self.progress, alignment=Qt.AlignHCenter)

        self.cancel_button = styled_button(self.tr("Cancel"), "secondary", self)
        self.cancel_button.clicked.connect(self.cancel_requested)
        layout.addWidget(self.cancel_button, alignment=Qt.AlignHCenter)
        layout.addStretch(1)
