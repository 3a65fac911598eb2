from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import logging

from PySide6.QtCore import QObject, Signal

from timingcurve.config import DEFAULT_DEMO, DEMO_KEYS
from timingcurve.model.geometry_primitives import UnitPoint
from timingcurve.model.timing import ControlPoint, TimingCurveModel, TimingFunction

logger = logging.getLogger(__name__)


class DemoKind(str, Enum):
    """The animations that can run next to the editor."""
    COLOR = "color"
    DOTS = "dots"


@dataclass
class DemoModel:
    """Which demo runs, and whether its timer is ticking."""
    kind: DemoKind = DemoKind(DEFAULT_DEMO)
    running: bool = False


@dataclass
class CurveModel:
    """Wraps the timing curve model so it can be handed around in signals."""
    timing: TimingCurveModel = field(default_factory=TimingCurveModel)


class Store(QObject):
    """Central state store with signals for editor/animation sync."""
    curve_changed = Signal(object)
    demo_changed = Signal(object)

    def __init__(self, timing: TimingCurveModel | None = None) -> None:
        super().__init__()
        self.curve_store = CurveModel(timing) if timing is not None else CurveModel()
        self.demo_store = DemoModel()

    @property
    def timing(self) -> TimingCurveModel:
        return self.curve_store.timing

    def control_point(self, which: ControlPoint) -> UnitPoint:
        return self.timing.control_point(which)

    def set_control_point(self, which: ControlPoint, value: UnitPoint) -> None:
        self.timing.set_control_point(which, value)
        self.curve_changed.emit(self.curve_store)

    def timing_function(self, duration: float | None = None) -> TimingFunction:
        if duration is None:
            return self.timing.generate_timing_function()
        return self.timing.generate_timing_function(duration)

    def set_demo(self, key: str) -> None:
        if key not in DEMO_KEYS:
            raise ValueError(f"Unknown demo '{key}'. Expected one of {', '.join(DEMO_KEYS)}.")
        kind = DemoKind(key)
        if kind == self.demo_store.kind:
            return
        self.demo_store.kind = kind
        logger.info(f"Demo switched to '{key}'")
        self.demo_changed.emit(self.demo_store)

    def set_running(self, running: bool) -> None:
        if running != self.demo_store.running:
            self.demo_store.running = running
            self.demo_changed.emit(self.demo_store)
