from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from timingcurve.model.geometry_primitives import UnitPoint


def format_control_point(name: str, point: UnitPoint) -> str:
    """Label text for a control point, e.g. 'CP0: (0.40, 0.40)'."""
    return f"{name}: ({point.x:.2f}, {point.y:.2f})"

def seconds_to_ms(seconds: float) -> int:
    """Convert seconds to whole milliseconds for Qt timers."""
    return max(0, int(round(seconds * 1000.0)))
