"""Génération d'overlays visuels pour le debug."""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from PIL import Image, ImageDraw

from tableau_bot.lib.s0_coordinates import CoordinateConverter
from tableau_bot.lib.s2_vision import CardMatch, VisionResult


@dataclass
class OverlayConfig:
    """Configuration des overlays."""
    alpha: int = 120
    colors: Dict[str, Tuple[int, int, int]] = None

    def __post_init__(self):
        if self.colors is None:
            self.colors = {
                "known": (0, 200, 0),       # Vert
                "unknown": (255, 0, 0),     # Rouge
                "text": (255, 255, 255),    # Blanc
            }


class OverlayRenderer:
    """Génère des overlays visuels."""

    def __init__(
        self,
        config: Optional[OverlayConfig] = None,
        converter: Optional[CoordinateConverter] = None,
    ):
        self.config = config or OverlayConfig()
        self.converter = converter or CoordinateConverter()

    def render_vision_overlay(
        self,
        base_image: Image.Image,
        vision_result: VisionResult,
        output_path: Optional[str] = None,
    ) -> Image.Image:
        """Génère un overlay pour les résultats vision."""
        overlay = base_image.copy().convert("RGBA")
        draw = ImageDraw.Draw(overlay, "RGBA")
        boxes = self.converter.sample_boxes()

        for match in vision_result.matches:
            box = boxes.get((match.column, match.depth))
            if box is not None:
                self._draw_card_match(draw, match, box.to_tuple())

        if output_path:
            overlay.convert("RGB").save(output_path)

        return overlay

    def _draw_card_match(
        self,
        draw: ImageDraw.ImageDraw,
        match: CardMatch,
        box: Tuple[int, int, int, int],
    ) -> None:
        """Dessine un échantillon reconnu (ou non)."""
        key = "unknown" if match.card is None else "known"
        color = self.config.colors[key]
        draw.rectangle(list(box), fill=(*color, self.config.alpha), outline=color)
        text = "?" if match.card is None else str(match.card)
        draw.text((box[0] + 2, box[1] + 2), text, fill=self.config.colors["text"])


def render_vision_overlay(
    base_image: Image.Image,
    vision_result: VisionResult,
    output_path: Optional[str] = None,
) -> Image.Image:
    """Génère un overlay vision (API fonctionnelle)."""
    return OverlayRenderer().render_vision_overlay(base_image, vision_result, output_path)
