from __future__ import annotations

from typing import Sequence

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QLabel,
    QListWidget,
    QListWidgetItem,
    QVBoxLayout,
    QWidget,
)

from ...core.models import Recording
from ..styles import styled_button
from ..widgets import WaveformPlot


class _RecordingRow(QWidget):
    def __init__(self, recording: Recording, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        header = QLabel(recording.label(), self)
        header.setStyleSheet("font-weight: bold;")
        layout.addWidget(header)
        plot = WaveformPlot(color="g", height=60, parent=self)
        plot.set_samples(recording.samples)
        layout.addWidget(plot)


class LogsScreen(QWidget):
    """Newest-first list of saved recordings with a preview of each."""

    back_requested = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)

        title = QLabel(self.tr("Previous Recordings"), self)
        title.setProperty("role", "title")
        title.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)

        self._empty_label = QLabel(self.tr("No recordings yet."), self)
        self._empty_label.setProperty("role", "muted")
        self._empty_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self._empty_label)

        self._list = QListWidget(self)
        layout.addWidget(self._list, stretch=1)

        self.back_button = styled_button(self.tr("Back to Menu"), "secondary", self)
        self.back_button.clicked.connect(self.back_requested)
        layout.addWidget(self.back_button, alignment=Qt.AlignHCenter)

        self.set_recordings(())

    def set_recordings(self, recordings: Sequence[Recording]) -> None:
        self._list.clear()
        for recording in recordings:
            item = QListWidgetItem(self._list)
            row = _RecordingRow(recording)
            item.setSizeHint(row.sizeHint())
            self._list.setItemWidget(item, row)
        empty = len(recordings) == 0
        self._empty_label.setVisible(empty)
        self._list.setVisible(not empty)
