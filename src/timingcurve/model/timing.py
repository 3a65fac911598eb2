"""
Timing Curve Model
==================
This module holds the two control points of the timing curve and derives
the easing function handed to the animation layer.

Why is this file needed?
------------------------
1. State: `cp0` and `cp1` are the only persistent state of the core. Views
   and controllers never keep copies of them.
2. Easing: `TimingFunction` is the value an animation driver consumes. It is
   a plain 5-tuple (x1, y1, x2, y2, duration) that can also evaluate itself
   the way a CSS-style `cubic-bezier()` easing is evaluated.

Classes:
    ControlPoint: Selector for the first or second control point.
    TimingFunction: Cubic-bezier easing over a duration.
    TimingCurveModel: The value holder.
"""
from __future__ import annotations

from enum import Enum
import logging
from typing import NamedTuple, TYPE_CHECKING

import numpy as np

from timingcurve.config import (
    DEFAULT_CP0, DEFAULT_CP1, DEFAULT_TIMING_DURATION,
    EASING_EPSILON, EASING_NEWTON_ITERATIONS, EASING_BISECTION_ITERATIONS,
)
from timingcurve.model.geometry_primitives import UnitPoint

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class ControlPoint(Enum):
    FIRST = "cp0"
    SECOND = "cp1"


class TimingFunction(NamedTuple):
    """
    Cubic-bezier easing from (0, 0) to (1, 1) with control points
    (x1, y1) and (x2, y2), played over `duration` seconds.
    """
    x1: float
    y1: float
    x2: float
    y2: float
    duration: float

    # ---- polynomial helpers ----

    @staticmethod
    def _bezier(t: float, p1: float, p2: float) -> float:
        mt = 1.0 - t
        return 3.0 * mt * mt * t * p1 + 3.0 * mt * t * t * p2 + t ** 3

    @staticmethod
    def _bezier_derivative(t: float, p1: float, p2: float) -> float:
        mt = 1.0 - t
        return 3.0 * mt * mt * p1 + 6.0 * mt * t * (p2 - p1) + 3.0 * t * t * (1.0 - p2)

    def _solve_t_for_x(self, x: float) -> float:
        """
        Find the curve parameter t with Bx(t) == x.

        Newton-Raphson first; if it does not converge (flat derivative or
        a step outside [0, 1]), fall back to bisection on [0, 1].
        """
        t = x
        for _ in range(EASING_NEWTON_ITERATIONS):
            error = self._bezier(t, self.x1, self.x2) - x
            if abs(error) < EASING_EPSILON:
                return t
            d = self._bezier_derivative(t, self.x1, self.x2)
            if abs(d) < 1e-6:
                break
            t -= error / d
            if not 0.0 <= t <= 1.0:
                break

        lo, hi = 0.0, 1.0
        t = x
        for _ in range(EASING_BISECTION_ITERATIONS):
            bx = self._bezier(t, self.x1, self.x2)
            if abs(bx - x) < EASING_EPSILON:
                break
            if bx < x:
                lo = t
            else:
                hi = t
            t = 0.5 * (lo + hi)
        return t

    # ---- public API ----

    def ease(self, progress: float) -> float:
        """
        Eased progress for a linear time fraction.

        Args:
            progress: Elapsed fraction of the duration.

        Returns:
            Animation progress. 0.0 for progress <= 0, 1.0 for progress >= 1;
            in between it may leave [0, 1] when y1/y2 overshoot.
        """
        if progress <= 0.0:
            return 0.0
        if progress >= 1.0:
            return 1.0
        t = self._solve_t_for_x(progress)
        return self._bezier(t, self.y1, self.y2)

    def value_at(self, elapsed: float) -> float:
        """Eased progress after `elapsed` seconds. A non-positive duration is instant."""
        if self.duration <= 0.0:
            return 1.0
        return self.ease(elapsed / self.duration)

    def sample(self, n_points: int = 101) -> npt.NDArray[np.float64]:
        """
        Sample the easing for plotting.

        Returns:
            Array of shape (n_points, 2) with (progress, eased progress) rows.

        Raises:
            ValueError: If fewer than 2 points are requested.
        """
        if n_points < 2:
            raise ValueError(f"n_points must be >= 2, got {n_points}")
        xs = np.linspace(0.0, 1.0, n_points)
        ys = np.array([self.ease(float(x)) for x in xs])
        return np.column_stack((xs, ys))


class TimingCurveModel:
    """
    Owns the two control points of the timing curve.

    Usage:
        model = TimingCurveModel()
        model.set_control_point(ControlPoint.FIRST, UnitPoint(0.2, 0.8))
        fn = model.generate_timing_function(1.0)  # (0.2, 0.8, 0.6, 0.6, 1.0)
    """

    def __init__(
        self,
        cp0: UnitPoint | None = None,
        cp1: UnitPoint | None = None
    ) -> None:
        self.cp0 = cp0 if cp0 is not None else UnitPoint(*DEFAULT_CP0)
        self.cp1 = cp1 if cp1 is not None else UnitPoint(*DEFAULT_CP1)

    def control_point(self, which: ControlPoint) -> UnitPoint:
        match which:
            case ControlPoint.FIRST:
                return self.cp0
            case ControlPoint.SECOND:
                return self.cp1
        raise ValueError(f"Unknown control point selector: {which!r}")

    def set_control_point(self, which: ControlPoint, value: UnitPoint) -> None:
        """Replace one control point. Values outside the unit square are kept as is."""
        match which:
            case ControlPoint.FIRST:
                self.cp0 = value
            case ControlPoint.SECOND:
                self.cp1 = value
            case _:
                raise ValueError(f"Unknown control point selector: {which!r}")
        logger.debug(f"{which.value} set to ({value.x:.4f}, {value.y:.4f})")

    def generate_timing_function(self, duration: float = DEFAULT_TIMING_DURATION) -> TimingFunction:
        """Timing function (x1, y1, x2, y2, duration) for the current control points."""
        return TimingFunction(self.cp0.x, self.cp0.y, self.cp1.x, self.cp1.y, duration)
