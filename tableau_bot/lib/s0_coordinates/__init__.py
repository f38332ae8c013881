"""Module s0_coordinates : Conversion plateau ↔ écran."""

from .types import ScreenPoint, ScreenBox
from .converter import CoordinateConverter

__all__ = [
    "ScreenPoint",
    "ScreenBox",
    "CoordinateConverter",
]
