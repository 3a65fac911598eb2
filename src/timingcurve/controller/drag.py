"""
Drag Controller
===============
Translates pointer positions in viewport pixels into control point updates.

The only reaction to a drag is `to_unit` followed by `set_control_point`.
Positions outside the viewport are accepted, so the user can pull a handle
out of the square to build an overshooting curve.
"""
from __future__ import annotations

import logging
from typing import Optional

from timingcurve.app.state import Store
from timingcurve.config import CONTROL_POINT_SIZE, GRAB_MARGIN, VIEWPORT_SIZE
from timingcurve.model.coordinates import CoordinateMapper
from timingcurve.model.geometry_primitives import PixelPoint
from timingcurve.model.timing import ControlPoint

logger = logging.getLogger(__name__)


class DragController:
    def __init__(self, store: Store, size: float = VIEWPORT_SIZE) -> None:
        self.store = store
        self.mapper = CoordinateMapper(size)
        self.grab_radius: float = CONTROL_POINT_SIZE / 2 + GRAB_MARGIN
        self._active: Optional[ControlPoint] = None

    @property
    def active(self) -> Optional[ControlPoint]:
        """The handle being dragged, if any."""
        return self._active

    def set_size(self, size: float) -> None:
        self.mapper.size = size

    def handle_position(self, which: ControlPoint) -> PixelPoint:
        return self.mapper.to_pixel(self.store.control_point(which))

    def handle_at(self, x: float, y: float) -> Optional[ControlPoint]:
        """
        Return the handle under the pointer, or None.
        The second handle is drawn on top, so it wins when both overlap.
        """
        pointer = PixelPoint(x, y)
        for which in (ControlPoint.SECOND, ControlPoint.FIRST):
            if self.handle_position(which).distance_to(pointer) <= self.grab_radius:
                return which
        return None

    def drag_to(self, which: ControlPoint, x: float, y: float) -> None:
        """Move a control point to the given viewport pixel position."""
        self.store.set_control_point(which, self.mapper.to_unit(PixelPoint(x, y)))

    # ---- press / move / release ----

    def press(self, x: float, y: float) -> Optional[ControlPoint]:
        self._active = self.handle_at(x, y)
        if self._active is not None:
            logger.debug(f"Grabbed {self._active.value} at ({x:.1f}, {y:.1f})")
        return self._active

    def move(self, x: float, y: float) -> bool:
        if self._active is None:
            return False
        self.drag_to(self._active, x, y)
        return True

    def release(self) -> None:
        self._active = None
