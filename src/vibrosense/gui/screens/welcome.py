from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

from ..styles import styled_button


class WelcomeScreen(QWidget):
    begin_requested = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setSpacing(20)
        layout.addStretch(1)

        title = QLabel(self.tr("Welcome to the VibroSensor App!"), self)
        title.setProperty("role", "title")
        title.setAlignment(Qt.AlignCenter)
        title.setWordWrap(True)
        layout.addWidget(title)

        self.begin_button = styled_button(self.tr("Begin"), "secondary", self)
        self.begin_button.clicked.connect(self.begin_requested)
        layout.addWidget(self.begin_button, alignment=Qt.AlignHCenter)
        layout.addStretch(1)
