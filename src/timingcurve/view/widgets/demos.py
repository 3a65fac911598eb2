"""
Demo Animations
Widgets that visualize the timing curve in motion: a sliding panel and a
row of staggered dots. Both are driven by the controllers in
`timingcurve.controller.animation` and never compute easing themselves.

Each widget owns a fixed set of animations, retargeted on every
cycle.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt, QRectF, QVariantAnimation
from PySide6.QtGui import QColor, QPainter, QPaintEvent, QBrush
from PySide6.QtWidgets import QWidget

from timingcurve.config import BACKGROUND_COLOR, PANEL_COLOR, DOT_COLOR, DOT_SIZE
from timingcurve.controller.animation import ColorChangeDemo, DotsDemo, to_easing_curve
from timingcurve.model.timing import TimingFunction
from timingcurve.utils import seconds_to_ms

logger = logging.getLogger(__name__)


def make_animation(parent: QWidget, on_value) -> QVariantAnimation:
    """A float animation owned by `parent` that reports every value to `on_value`."""
    animation = QVariantAnimation(parent)
    animation.valueChanged.connect(lambda value: on_value(float(value)))
    return animation


def retarget(animation: QVariantAnimation, fn: TimingFunction, start: float, end: float) -> None:
    """Stop `animation` and reshape it to run from `start` to `end` along `fn`."""
    animation.stop()
    animation.setStartValue(float(start))
    animation.setEndValue(float(end))
    animation.setDuration(seconds_to_ms(fn.duration))
    animation.setEasingCurve(to_easing_curve(fn))


class SlidingPanelWidget(QWidget):
    """Blue background with a green panel sliding left and back on every toggle."""

    def __init__(self, demo: ColorChangeDemo, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.demo = demo
        self.offset: float = 0.0
        self.setMinimumHeight(120)

        self._animation = make_animation(self, self._set_offset)
        self.demo.changed.connect(self._on_changed)

    def target_offset(self, change: bool) -> float:
        return -float(self.width()) if change else 0.0

    def _set_offset(self, value: float) -> None:
        self.offset = value
        self.update()

    def _on_changed(self, change: bool) -> None:
        retarget(self._animation, self.demo.timing_function(), self.offset, self.target_offset(change))
        self._animation.start()

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.fillRect(self.rect(), QColor(BACKGROUND_COLOR))
        painter.fillRect(QRectF(self.offset, 0.0, self.width(), self.height()), QColor(PANEL_COLOR))
        painter.end()


class DotsWidget(QWidget):
    """
    Stacked dots that each sweep from -max_offset to +max_offset on their own
    staggered schedule.

    Dot positions are kept in [-1, 1] and scaled by the current width when
    read, so the rest position follows layout changes.
    """

    def __init__(self, demo: DotsDemo, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.demo = demo
        self.positions: list[float] = [-1.0] * demo.num_dots
        self.setMinimumHeight(120)

        self._animations = [
            make_animation(self, lambda v, i=index: self._set_position(i, v))
            for index in range(demo.num_dots)
        ]
        self.demo.dot_reset.connect(self._on_reset)
        self.demo.dot_animate.connect(self._on_animate)

    def max_offset(self) -> float:
        return self.width() / 2 + DOT_SIZE

    @property
    def offsets(self) -> list[float]:
        """Horizontal dot offsets from the center in pixels."""
        scale = self.max_offset()
        return [p * scale for p in self.positions]

    def _set_position(self, index: int, value: float) -> None:
        self.positions[index] = value
        self.update()

    def _on_reset(self, index: int) -> None:
        self._animations[index].stop()
        self._set_position(index, -1.0)

    def _on_animate(self, index: int, fn: TimingFunction) -> None:
        animation = self._animations[index]
        retarget(animation, fn, -1.0, 1.0)
        animation.start()

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.fillRect(self.rect(), QColor(BACKGROUND_COLOR))
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(QColor(DOT_COLOR)))
        cx = self.width() / 2
        cy = self.height() / 2
        r = DOT_SIZE / 2
        for offset in self.offsets:
            painter.drawEllipse(QRectF(cx + offset - r, cy - r, DOT_SIZE, DOT_SIZE))
        painter.end()
