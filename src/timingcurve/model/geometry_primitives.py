"""
Geometric Primitives for the timing curve editor.

Two coordinate systems are in play:
    - unit space: the [0, 1] x [0, 1] square, y measured bottom-up,
    - pixel space: the editor viewport, y measured top-down.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, TYPE_CHECKING
import numpy as np
import math

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass
class UnitPoint:
    """
    A control point position relative to the unit square (y up).
    Values outside [0, 1] are allowed and describe overshooting curves.
    """
    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def scaled(self, factor: float) -> UnitPoint:
        return UnitPoint(self.x * factor, self.y * factor)

    def as_tuple(self) -> tuple[float, float]:
        return self.x, self.y


@dataclass
class PixelPoint:
    """A point in viewport pixel space (y down)."""
    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def distance_to(self, other: PixelPoint) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def as_tuple(self) -> tuple[float, float]:
        return self.x, self.y

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y], dtype=np.float64)


@dataclass(frozen=True)
class CurveRect:
    """
    The square viewport the curve is anchored to.

    The curve always runs from the bottom-left corner to the top-right corner.
    In pixel space 'bottom' is the larger y value.
    """
    size: float
    left: float = 0.0
    top: float = 0.0

    @property
    def right(self) -> float:
        return self.left + self.size

    @property
    def bottom(self) -> float:
        return self.top + self.size

    @property
    def bottom_left(self) -> PixelPoint:
        return PixelPoint(self.left, self.bottom)

    @property
    def top_right(self) -> PixelPoint:
        return PixelPoint(self.right, self.top)

    def grid_lines(self, columns: int = 10, rows: int = 10) -> list[tuple[PixelPoint, PixelPoint]]:
        """
        Lines of an evenly spaced layout guide, borders included.

        Args:
            columns: Number of grid cells along x.
            rows: Number of grid cells along y.

        Returns:
            (columns + 1) vertical lines followed by (rows + 1) horizontal lines,
            each as a (start, end) pair.

        Raises:
            ValueError: If columns or rows is not positive.
        """
        if columns < 1 or rows < 1:
            raise ValueError(f"Grid needs at least one column and row, got {columns}x{rows}.")

        lines: list[tuple[PixelPoint, PixelPoint]] = []
        for x in np.linspace(self.left, self.right, columns + 1):
            lines.append((PixelPoint(float(x), self.top), PixelPoint(float(x), self.bottom)))
        for y in np.linspace(self.top, self.bottom, rows + 1):
            lines.append((PixelPoint(self.left, float(y)), PixelPoint(self.right, float(y))))
        return lines
