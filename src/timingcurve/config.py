"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Compatibility: The default control points, viewport size and durations
   reproduce the reference visuals exactly and must not drift between
   modules.
2. Single source: Views, controllers and the model read the same numbers
   instead of repeating literals.

Exports:
    DEFAULT_CP0, DEFAULT_CP1 (tuple): Initial control points (unit square).
    VIEWPORT_SIZE (float): Side length of the curve editor in pixels.
"""
# Timing curve defaults (unit square, y up)
DEFAULT_CP0: tuple[float, float] = (0.4, 0.4)
DEFAULT_CP1: tuple[float, float] = (0.6, 0.6)

# Durations in seconds
DEFAULT_TIMING_DURATION: float = 0.35
COLOR_CHANGE_DURATION: float = 1.0
DOTS_DURATION: float = 1.0

# Curve editor geometry (pixels)
VIEWPORT_SIZE: float = 200.0
CONTROL_POINT_SIZE: float = 10.0
GRAB_MARGIN: float = 4.0
CURVE_LINE_WIDTH: float = 2.0
HANDLE_LINE_WIDTH: float = 2.0
GRID_COLUMNS: int = 10
GRID_ROWS: int = 10

# Dots demo
DOT_SIZE: float = 8.0
NUM_DOTS: int = 5
DOT_STAGGER: float = 0.2

# Palette
BACKGROUND_COLOR: str = "#0000FF"
PANEL_COLOR: str = "#00FF00"
CURVE_COLOR: str = "#FFFFFF"
GRID_COLOR: str = "#FFFFFF"
CP0_COLOR: str = "#00C000"
CP1_COLOR: str = "#FFFF00"
HANDLE_OUTLINE_COLOR: str = "#000000"
DOT_COLOR: str = "#FFFFFF"

# Easing solver
EASING_EPSILON: float = 1e-7
EASING_NEWTON_ITERATIONS: int = 8
EASING_BISECTION_ITERATIONS: int = 40

DEMO_KEYS: tuple[str, ...] = ("color", "dots")
DEFAULT_DEMO: str = "color"
