"""Analyse vision : reconnaissance du tableau distribué."""

import time
from pathlib import Path
from typing import List, Optional

import numpy as np
from PIL import Image

from tableau_bot.lib.s0_coordinates import CoordinateConverter
from .matcher import CardTemplateMatcher
from .types import CardMatch, VisionInput, VisionResult


class BoardVision:
    """Reconnaît les cartes de chaque colonne à partir d'une capture."""

    def __init__(
        self,
        templates_dir: Optional[Path] = None,
        converter: Optional[CoordinateConverter] = None,
        matcher: Optional[CardTemplateMatcher] = None,
    ):
        self.converter = converter or CoordinateConverter()
        self.matcher = matcher or CardTemplateMatcher(
            templates_dir, sample_size=self.converter.sample_size
        )

    def analyze(self, input: VisionInput) -> VisionResult:
        """Analyse une capture du tableau et retourne les colonnes reconnues."""
        timestamp = time.time()
        image_np = np.array(input.image.convert("RGB"))
        boxes = self.converter.sample_boxes(input.columns, input.depth)
        board = self.converter.board_box(input.columns, input.depth)
        if input.image.width < board.width or input.image.height < board.height:
            raise ValueError(
                f"Capture de taille {input.image.size} plus petite que le tableau "
                f"({board.width}x{board.height})"
            )

        matches: List[CardMatch] = []
        columns: List[List[int]] = []
        for column in range(input.columns):
            cards: List[int] = []
            for depth in range(input.depth):
                box = boxes[(column, depth)]
                patch = image_np[box.top:box.bottom, box.left:box.right]
                result = self.matcher.classify_patch(patch)
                matches.append(CardMatch.from_match_result(column, depth, result))
                # une position non reconnue est ignorée
                if result.card is not None:
                    cards.append(result.card)
            columns.append(cards)

        return VisionResult(
            matches=matches,
            columns=columns,
            difficulty=input.difficulty,
            expected_count=input.columns * input.depth,
            timestamp=timestamp,
            metadata={"image_size": input.image.size},
        )

    def analyze_image_file(self, image_path, difficulty: int = 0) -> VisionResult:
        """Analyse une capture depuis un fichier."""
        image = Image.open(image_path).convert("RGB")
        return self.analyze(VisionInput(image=image, difficulty=difficulty))


# === API fonctionnelle ===

_default_vision: Optional[BoardVision] = None


def _get_vision() -> BoardVision:
    global _default_vision
    if _default_vision is None:
        _default_vision = BoardVision()
    return _default_vision


def analyze(input: VisionInput) -> VisionResult:
    """Analyse une capture du tableau."""
    return _get_vision().analyze(input)
