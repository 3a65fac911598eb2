"""
Main Window
===========
Hosts the running demo on top and the curve editor below it.

Layout:
    - top: the active demo (sliding panel or dots), stretched,
    - bottom-left: curve editor with the CP0/CP1 labels,
    - bottom-right: demo selector and the easing plot.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt, QSignalBlocker
from PySide6.QtGui import QCloseEvent, QShowEvent
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QComboBox, QStackedWidget, QGroupBox
)

from timingcurve.app.application import VISIBLE_APP_NAME, save_last_demo
from timingcurve.app.state import Store, DemoKind
from timingcurve.config import DEMO_KEYS
from timingcurve.controller.animation import ColorChangeDemo, DotsDemo
from timingcurve.model.timing import ControlPoint
from timingcurve.utils import format_control_point
from timingcurve.view.widgets.curve_editor import CurveEditorWidget
from timingcurve.view.widgets.demos import SlidingPanelWidget, DotsWidget
from timingcurve.view.widgets.easing_plot import EasingPlotWidget

logger = logging.getLogger(__name__)

DEMO_LABELS = {
    "color": "Color change",
    "dots": "Dots",
}


class MainWindow(QMainWindow):
    def __init__(self, store: Store) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(900, 700)

        self.store = store

        # ---- Controllers ----
        self.color_demo = ColorChangeDemo(store, parent=self)
        self.dots_demo = DotsDemo(store, parent=self)
        self._demos = {
            DemoKind.COLOR: self.color_demo,
            DemoKind.DOTS: self.dots_demo,
        }

        # ---- Widgets ----
        central = QWidget(self)
        root = QVBoxLayout(central)

        self.demo_stack = QStackedWidget(central)
        self.sliding_panel = SlidingPanelWidget(self.color_demo, self.demo_stack)
        self.dots_view = DotsWidget(self.dots_demo, self.demo_stack)
        self.demo_stack.addWidget(self.sliding_panel)
        self.demo_stack.addWidget(self.dots_view)
        root.addWidget(self.demo_stack, 1)

        bottom = QHBoxLayout()
        root.addLayout(bottom, 0)

        editor_box = QGroupBox(self.tr("Timing curve"), central)
        editor_layout = QVBoxLayout(editor_box)
        self.editor = CurveEditorWidget(store, parent=editor_box)
        editor_layout.addWidget(self.editor, 0, Qt.AlignmentFlag.AlignHCenter)
        self.label_cp0 = QLabel(editor_box)
        self.label_cp1 = QLabel(editor_box)
        editor_layout.addWidget(self.label_cp0)
        editor_layout.addWidget(self.label_cp1)
        bottom.addWidget(editor_box, 0)

        side = QVBoxLayout()
        self.combo_demo = QComboBox(central)
        for key in DEMO_KEYS:
            self.combo_demo.addItem(self.tr(DEMO_LABELS.get(key, key)), userData=key)
        side.addWidget(self.combo_demo, 0)
        self.easing_plot = EasingPlotWidget(store, parent=central)
        side.addWidget(self.easing_plot, 1)
        bottom.addLayout(side, 1)

        self.setCentralWidget(central)

        # ---- Wiring ----
        self.store.curve_changed.connect(lambda *_: self._refresh_labels())
        self.store.demo_changed.connect(lambda *_: self._apply_demo())
        self.combo_demo.currentIndexChanged.connect(self._on_demo_selected)

        self.combo_demo.setCurrentIndex(DEMO_KEYS.index(self.store.demo_store.kind.value))
        self.demo_stack.setCurrentIndex(DEMO_KEYS.index(self.store.demo_store.kind.value))
        self._refresh_labels()

    def _refresh_labels(self) -> None:
        self.label_cp0.setText(format_control_point("CP0", self.store.control_point(ControlPoint.FIRST)))
        self.label_cp1.setText(format_control_point("CP1", self.store.control_point(ControlPoint.SECOND)))

    def _on_demo_selected(self, index: int) -> None:
        key = self.combo_demo.itemData(index)
        self.store.set_demo(key)
        save_last_demo(key)

    def _apply_demo(self) -> None:
        """Stop all demos, then run the selected one if the window is live."""
        kind = self.store.demo_store.kind
        for demo in self._demos.values():
            demo.stop()
        index = DEMO_KEYS.index(kind.value)
        blocker = QSignalBlocker(self.combo_demo)
        self.combo_demo.setCurrentIndex(index)
        blocker.unblock()
        self.demo_stack.setCurrentIndex(index)
        if self.store.demo_store.running:
            self._demos[kind].start()

    def showEvent(self, event: QShowEvent) -> None:
        super().showEvent(event)
        if not self.store.demo_store.running:
            self.store.set_running(True)

    def closeEvent(self, event: QCloseEvent) -> None:
        self.store.set_running(False)
        super().closeEvent(event)
