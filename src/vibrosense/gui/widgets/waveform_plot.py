from __future__ import annotations

import numpy as np
import pyqtgraph as pg
from PySide6.QtWidgets import QVBoxLayout, QWidget


class WaveformPlot(QWidget):
    """
    Minimal pyqtgraph line plot for a single waveform.

    Axes, mouse interaction and the menu are hidden so it reads like a
    sparkline; the y range is fixed so bursts are visible against the
    baseline.
    """

    def __init__(
        self,
        color: str = "b",
        height: int = 100,
        y_range: tuple[float, float] = (-1.0, 1.0),
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._plot = pg.PlotWidget(self)
        self._plot.setBackground(None)
        self._plot.setMouseEnabled(x=False, y=False)
        self._plot.setMenuEnabled(False)
        self._plot.hideButtons()
        for axis in ("left", "bottom"):
            self._plot.hideAxis(axis)
        self._plot.setYRange(*y_range, padding=0.0)
        self._plot.setFixedHeight(height)
        self._curve = self._plot.plot(pen=pg.mkPen(color, width=2))

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._plot)

    def set_samples(self, samples: np.ndarray) -> None:
        samples = np.asarray(samples, dtype=np.float64)
        self._curve.setData(np.arange(samples.shape[0]), samples)
        if samples.shape[0] > 1:
            self._plot.setXRange(0, samples.shape[0] - 1, padding=0.0)
