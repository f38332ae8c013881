"""Conversion de coordonnées plateau ↔ écran."""

from typing import Dict, Tuple

from tableau_bot.config import (
    CARD_ORIGIN,
    CARD_SAMPLE_SIZE,
    CARD_STRIDE,
    COLUMN_COUNT,
    COLUMN_DEPTH,
    SCREEN_OFFSET,
    SLOT_ORIGIN,
    SLOT_STRIDE,
)
from tableau_bot.lib.s3_state import Location
from .types import ScreenBox, ScreenPoint


class CoordinateConverter:
    """Convertisseur de positions de cartes en pixels écran."""

    def __init__(
        self,
        screen_offset: Tuple[int, int] = SCREEN_OFFSET,
        card_origin: Tuple[int, int] = CARD_ORIGIN,
        card_stride: Tuple[int, int] = CARD_STRIDE,
        sample_size: int = CARD_SAMPLE_SIZE,
        slot_origin: Tuple[int, int] = SLOT_ORIGIN,
        slot_stride: int = SLOT_STRIDE,
    ):
        self.screen_offset = screen_offset
        self.card_origin = card_origin
        self.card_stride = card_stride
        self.sample_size = sample_size
        self.slot_origin = slot_origin
        self.slot_stride = slot_stride
        self.sample_center = sample_size // 2

    # === Monitor ↔ Screen ===

    def to_screen(self, x: int, y: int) -> ScreenPoint:
        """Convertit une position relative au moniteur du jeu → écran."""
        return ScreenPoint(self.screen_offset[0] + x, self.screen_offset[1] + y)

    # === Cartes ===

    def card_sample_box(self, column: int, depth: int) -> ScreenBox:
        """Zone échantillonnée (relative au moniteur) pour la carte `depth` de `column`."""
        left = self.card_origin[0] + self.card_stride[0] * column
        top = self.card_origin[1] + self.card_stride[1] * depth
        return ScreenBox(left, top, left + self.sample_size, top + self.sample_size)

    def card_point(self, column: int, depth: int) -> ScreenPoint:
        """Centre écran de l'échantillon de la carte `depth` (0 = bas) de `column`."""
        box = self.card_sample_box(column, depth)
        return self.to_screen(box.left + self.sample_center, box.top + self.sample_center)

    def slot_point(self, index: int) -> ScreenPoint:
        """Centre écran d'une case de réserve."""
        x = self.slot_origin[0] + self.slot_stride * index + self.sample_center
        y = self.slot_origin[1] + self.sample_center
        return self.to_screen(x, y)

    def location_point(self, location: Location, depth: int) -> ScreenPoint:
        """Point écran d'une carte à la profondeur `depth` dans une pile."""
        if location.is_slot:
            # les cartes d'une case sont superposées
            return self.slot_point(location.index)
        return self.card_point(location.index, depth)

    # === Zone de capture ===

    def board_box(self, columns: int = COLUMN_COUNT, depth: int = COLUMN_DEPTH) -> ScreenBox:
        """Rectangle (relatif au moniteur) englobant toutes les cartes distribuées."""
        first = self.card_sample_box(0, 0)
        last = self.card_sample_box(columns - 1, depth - 1)
        return ScreenBox(first.left, first.top, last.right, last.bottom)

    def sample_boxes(
        self,
        columns: int = COLUMN_COUNT,
        depth: int = COLUMN_DEPTH,
    ) -> Dict[Tuple[int, int], ScreenBox]:
        """Zones d'échantillonnage relatives au coin de board_box(), par (colonne, profondeur)."""
        board = self.board_box(columns, depth)
        boxes = {}
        for column in range(columns):
            for row in range(depth):
                boxes[(column, row)] = self.card_sample_box(column, row).translate(-board.left, -board.top)
        return boxes
