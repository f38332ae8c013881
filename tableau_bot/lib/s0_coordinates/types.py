"""Types pour le module s0_coordinates."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ScreenPoint:
    """Point en coordonnées écran (pixels absolus)."""
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "ScreenPoint":
        return ScreenPoint(self.x + dx, self.y + dy)

    def to_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


@dataclass(frozen=True)
class ScreenBox:
    """Rectangle écran (left, top, right, bottom), bornes droite/basse exclues."""
    left: int
    top: int
    right: int
    bottom: int

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    def translate(self, dx: int, dy: int) -> "ScreenBox":
        return ScreenBox(self.left + dx, self.top + dy, self.right + dx, self.bottom + dy)

    def to_tuple(self) -> Tuple[int, int, int, int]:
        return (self.left, self.top, self.right, self.bottom)
