"""
Animation Drivers (Timers)
==========================
This module contains the periodic timers that drive the demo animations.

Why is this file needed?
------------------------
1. Decoupling: The curve math never schedules anything. Timers live here and
   ask the store for a fresh timing function on every tick, so a handle
   dragged mid-cycle shapes the next cycle.
2. Signals: Views subscribe to Qt signals instead of polling flags.

Classes:
    AnimationDriver: Repeating QTimer that invokes callbacks.
    ColorChangeDemo: Toggles a boolean every cycle (sliding panel demo).
    DotsDemo: Staggered per-dot flags (moving dots demo).
"""
from __future__ import annotations

import logging
from typing import Callable

from PySide6.QtCore import QObject, QPointF, QTimer, Signal, QEasingCurve

from timingcurve.app.state import Store
from timingcurve.config import COLOR_CHANGE_DURATION, DOTS_DURATION, NUM_DOTS, DOT_STAGGER
from timingcurve.model.timing import TimingFunction
from timingcurve.utils import seconds_to_ms

logger = logging.getLogger(__name__)


def to_easing_curve(fn: TimingFunction) -> QEasingCurve:
    """Qt easing curve equivalent to a cubic-bezier timing function."""
    curve = QEasingCurve(QEasingCurve.Type.BezierSpline)
    curve.addCubicBezierSegment(
        QPointF(fn.x1, fn.y1), QPointF(fn.x2, fn.y2), QPointF(1.0, 1.0)
    )
    return curve


class AnimationDriver(QObject):
    """Invokes the registered callbacks every `interval` seconds until stopped."""
    ticked = Signal()

    def __init__(self, interval: float, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.interval = interval
        self._callbacks: list[Callable[[], None]] = []

        self._timer = QTimer(self)
        self._timer.setSingleShot(False)
        self._timer.setInterval(seconds_to_ms(interval))
        self._timer.timeout.connect(self.tick)

    @property
    def is_running(self) -> bool:
        return self._timer.isActive()

    def add_callback(self, callback: Callable[[], None]) -> None:
        self._callbacks.append(callback)

    def start(self) -> None:
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()

    def tick(self) -> None:
        """Run one cycle. Called by the timer; callable directly as well."""
        for callback in self._callbacks:
            callback()
        self.ticked.emit()


class ColorChangeDemo(QObject):
    """A single `change` flag toggled once per cycle."""
    changed = Signal(bool)

    def __init__(self, store: Store, duration: float = COLOR_CHANGE_DURATION, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self.duration = duration
        self.change = False

        self.driver = AnimationDriver(duration, self)
        self.driver.add_callback(self.toggle)

    def timing_function(self) -> TimingFunction:
        return self.store.timing_function(self.duration)

    def toggle(self) -> None:
        self.change = not self.change
        self.changed.emit(self.change)

    def start(self) -> None:
        logger.info(f"Color change demo started ({self.duration:g} s cycle)")
        self.driver.start()

    def stop(self) -> None:
        if self.driver.is_running:
            logger.info("Color change demo stopped")
        self.driver.stop()


class DotsDemo(QObject):
    """
    One animated flag per dot. Dot `i` starts its own repeating cycle after
    `i * stagger` seconds. Each cycle snaps the flag back to False and then
    animates it to True.
    """
    dot_reset = Signal(int)
    dot_animate = Signal(int, object)  # index, TimingFunction

    def __init__(
        self,
        store: Store,
        duration: float = DOTS_DURATION,
        num_dots: int = NUM_DOTS,
        stagger: float = DOT_STAGGER,
        parent: QObject | None = None
    ) -> None:
        super().__init__(parent)
        self.store = store
        self.duration = duration
        self.stagger = stagger
        self.animating: list[bool] = [False] * num_dots

        self._delays: list[QTimer] = []
        self.drivers: list[AnimationDriver] = []
        for index in range(num_dots):
            delay = QTimer(self)
            delay.setSingleShot(True)
            delay.setInterval(seconds_to_ms(self.start_delay(index)))
            delay.timeout.connect(lambda i=index: self._start_dot(i))
            self._delays.append(delay)

            driver = AnimationDriver(duration, self)
            driver.add_callback(lambda i=index: self.tick_dot(i))
            self.drivers.append(driver)

    @property
    def num_dots(self) -> int:
        return len(self.animating)

    def start_delay(self, index: int) -> float:
        """Seconds before dot `index` starts cycling."""
        return index * self.stagger

    def timing_function(self) -> TimingFunction:
        return self.store.timing_function(self.duration)

    def tick_dot(self, index: int) -> None:
        self.animating[index] = False
        self.dot_reset.emit(index)
        self.animating[index] = True
        self.dot_animate.emit(index, self.timing_function())

    def start(self) -> None:
        logger.info(f"Dots demo started ({self.num_dots} dots, {self.stagger:g} s stagger)")
        for delay in self._delays:
            delay.start()

    def stop(self) -> None:
        if any(d.isActive() for d in self._delays) or any(d.is_running for d in self.drivers):
            logger.info("Dots demo stopped")
        for delay in self._delays:
            delay.stop()
        for driver in self.drivers:
            driver.stop()

    def _start_dot(self, index: int) -> None:
        logger.debug(f"Dot {index} cycling")
        self.drivers[index].start()
