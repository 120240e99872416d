from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

from ..styles import styled_button


class MenuScreen(QWidget):
    """Main menu: start a capture, browse old recordings, or export them."""

    capture_requested = Signal()
    view_logs_requested = Signal()
    export_requested = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setSpacing(30)
        layout.addStretch(1)

        title = QLabel(self.tr("Main Menu"), self)
        title.setProperty("role", "title")
        title.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)

        self.capture_button = styled_button(self.tr("Capture New Recording"), "primary", self)
        self.logs_button = styled_button(self.tr("View Old Logs"), "secondary", self)
        self.export_button = styled_button(self.tr("Export Logs"), "secondary", self)

        self.capture_button.clicked.connect(self.capture_requested)
        self.logs_button.clicked.connect(self.view_logs_requested)
        self.export_button.clicked.connect(self.export_requested)

        for button in (self.capture_button, self.logs_button, self.export_button):
            layout.addWidget(button, alignment=Qt.AlignHCenter)
        layout.addStretch(1)

    def set_recording_count(self, count: int) -> None:
        self.export_button.setEnabled(count > 0)
