"""Plot of eased progress against elapsed time for the current curve."""
from __future__ import annotations

import logging

import pyqtgraph as pg
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QVBoxLayout

from timingcurve.app.state import Store

logger = logging.getLogger(__name__)


class EasingPlotWidget(QWidget):
    """Refreshes on every curve change; overshoot shows up as values outside [0, 1]."""

    def __init__(self, store: Store, n_samples: int = 101, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self.n_samples = n_samples

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.plot_widget = pg.PlotWidget()
        self.plot_widget.setLabel("bottom", "Time", units="")
        self.plot_widget.setLabel("left", "Progress", units="")
        self.plot_widget.showGrid(x=True, y=True, alpha=0.3)
        self.plot_widget.setXRange(0.0, 1.0, padding=0.05)
        self.plot_widget.setMouseEnabled(x=False, y=False)
        layout.addWidget(self.plot_widget)

        self.plot_widget.plot([0.0, 1.0], [0.0, 1.0], pen=pg.mkPen(color=(150, 150, 150), width=1, style=Qt.PenStyle.DashLine))
        self.curve_item = self.plot_widget.plot([], [], pen=pg.mkPen(color=(0, 0, 255), width=2))

        self.store.curve_changed.connect(lambda *_: self.refresh())
        self.refresh()

    def refresh(self) -> None:
        samples = self.store.timing_function().sample(self.n_samples)
        self.curve_item.setData(samples[:, 0], samples[:, 1])
