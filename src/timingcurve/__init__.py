"""Interactive cubic Bezier timing curve editor."""
__version__ = "0.1.0"
