from __future__ import annotations

from timingcurve.model.geometry_primitives import UnitPoint, PixelPoint


def invert_y(point: UnitPoint) -> UnitPoint:
    """Flip the y-axis within the unit square."""
    return UnitPoint(point.x, 1.0 - point.y)

def to_pixel(unit_point: UnitPoint, size: float) -> PixelPoint:
    """
    Map a unit-square point (y up) to viewport pixels (y down).

    Args:
        unit_point: Point in the unit square.
        size: Side length of the square viewport in pixels.

    Returns:
        The pixel position. Lies within [0, size] x [0, size] whenever
        the unit point lies within the unit square.

    Notes:
        - A non-positive size is not rejected; it yields a degenerate point.
    """
    inverted = invert_y(unit_point)
    return PixelPoint(inverted.x * size, inverted.y * size)

def to_unit(pixel_point: PixelPoint, size: float) -> UnitPoint:
    """
    Map a viewport pixel position (y down) back to the unit square (y up).
    Exact inverse of `to_pixel`.

    Args:
        pixel_point: Position in viewport pixels.
        size: Side length of the square viewport in pixels.

    Returns:
        The unit-square point. No clamping is applied.

    Raises:
        ValueError: If size is zero.
    """
    if size == 0.0:
        raise ValueError("Viewport size must be nonzero.")
    scaled = UnitPoint(pixel_point.x, pixel_point.y).scaled(1.0 / size)
    return invert_y(scaled)


class CoordinateMapper:
    """Binds `to_pixel`/`to_unit` to a fixed viewport size."""

    def __init__(self, size: float) -> None:
        self.size = size

    def to_pixel(self, unit_point: UnitPoint) -> PixelPoint:
        return to_pixel(unit_point, self.size)

    def to_unit(self, pixel_point: PixelPoint) -> UnitPoint:
        return to_unit(pixel_point, self.size)
