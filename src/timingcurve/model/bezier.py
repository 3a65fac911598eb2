"""
Cubic Bezier Path Construction
==============================
Builds the stroke-able path shown in the curve editor.

Mathematical form:
    B(t) = (1-t)^3 P0 + 3(1-t)^2 t P1 + 3(1-t) t^2 P2 + t^3 P3,  t in [0, 1]

P0 and P3 are the fixed anchors (bottom-left and top-right corner of the
viewport), P1 and P2 are the user's control points mapped to pixels.
Control points are not clamped, so the curve may leave the viewport.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from timingcurve.model.geometry_primitives import PixelPoint, CurveRect

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class CubicTo:
    """A single cubic segment ending at `end`."""
    end: PixelPoint
    control1: PixelPoint
    control2: PixelPoint


@dataclass(frozen=True)
class PathDescriptor:
    """
    Declarative description of the curve: move to `start`, then one cubic
    segment. Drawing is left to the renderer.
    """
    start: PixelPoint
    cubic_to: CubicTo

    @property
    def end(self) -> PixelPoint:
        return self.cubic_to.end

    @property
    def control1(self) -> PixelPoint:
        return self.cubic_to.control1

    @property
    def control2(self) -> PixelPoint:
        return self.cubic_to.control2

    def control_points(self) -> npt.NDArray[np.float64]:
        """The four Bezier points [P0, P1, P2, P3] as a (4, 2) array."""
        return np.array([
            self.start.as_tuple(),
            self.control1.as_tuple(),
            self.control2.as_tuple(),
            self.end.as_tuple(),
        ], dtype=np.float64)

    def point_at(self, t: float) -> PixelPoint:
        """Evaluate the curve at parameter t (clamped to [0, 1])."""
        t = max(0.0, min(1.0, t))
        x, y = (_bernstein(np.array([t])) @ self.control_points())[0]
        return PixelPoint(float(x), float(y))

    def discretize(self, n_points: int = 64) -> npt.NDArray[np.float64]:
        """
        Sample the curve into a polyline.

        Args:
            n_points: Number of points including both anchors.

        Returns:
            Array of shape (n_points, 2) with pixel coordinates.

        Raises:
            ValueError: If fewer than 2 points are requested.
        """
        if n_points < 2:
            raise ValueError(f"n_points must be >= 2, got {n_points}")
        ts = np.linspace(0.0, 1.0, n_points)
        return _bernstein(ts) @ self.control_points()

    def control_polygon(self) -> list[tuple[PixelPoint, PixelPoint]]:
        """Guide segments from each anchor to its control point."""
        return [(self.start, self.control1), (self.end, self.control2)]


def _bernstein(ts: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """Cubic Bernstein basis, shape (len(ts), 4)."""
    mt = 1.0 - ts
    return np.column_stack((mt ** 3, 3 * mt ** 2 * ts, 3 * mt * ts ** 2, ts ** 3))


def build_curve(cp0_pixel: PixelPoint, cp1_pixel: PixelPoint, rect: CurveRect) -> PathDescriptor:
    """
    Build the timing curve path anchored to the viewport corners.

    Args:
        cp0_pixel: First control point in pixels.
        cp1_pixel: Second control point in pixels.
        rect: The viewport; start is its bottom-left, end its top-right corner.

    Returns:
        A single cubic segment path descriptor.
    """
    return PathDescriptor(
        start=rect.bottom_left,
        cubic_to=CubicTo(end=rect.top_right, control1=cp0_pixel, control2=cp1_pixel),
    )
