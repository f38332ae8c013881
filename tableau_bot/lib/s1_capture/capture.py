"""Capture d'une zone de l'écran via Pillow."""

import os
import time
from datetime import datetime
from typing import Optional

from PIL import Image, ImageGrab

from tableau_bot.lib.s0_coordinates import CoordinateConverter
from .types import CaptureInput, CaptureResult


class ScreenCaptureBackend:
    """Capture directe d'un rectangle écran (tous moniteurs)."""

    def __init__(self, default_save_dir: str = "temp/captures"):
        self.default_save_dir = default_save_dir

    def capture(self, input: CaptureInput) -> CaptureResult:
        """Capture une zone de l'écran."""
        if input.box.width <= 0 or input.box.height <= 0:
            raise ValueError("La taille de capture doit être strictement positive.")

        timestamp = time.time()
        image = ImageGrab.grab(bbox=input.box.to_tuple(), all_screens=True).convert("RGB")

        saved_path = None
        if input.save:
            saved_path = self._save_image(
                image, filename=input.filename, save_dir=input.save_dir
            )

        return CaptureResult(
            image=image,
            box=input.box,
            timestamp=timestamp,
            saved_path=saved_path,
            metadata=input.metadata,
        )

    def _save_image(
        self,
        image: Image.Image,
        filename: Optional[str] = None,
        save_dir: Optional[str] = None,
    ) -> str:
        """Sauvegarde l'image capturée en PNG."""
        target_dir = save_dir or self.default_save_dir
        os.makedirs(target_dir, exist_ok=True)
        if not filename:
            filename = f"board_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')}.png"
        path = os.path.join(target_dir, filename)
        image.save(path)
        return path


# === API fonctionnelle ===

_default_backend: Optional[ScreenCaptureBackend] = None


def _get_backend() -> ScreenCaptureBackend:
    global _default_backend
    if _default_backend is None:
        _default_backend = ScreenCaptureBackend()
    return _default_backend


def capture_zone(input: CaptureInput) -> CaptureResult:
    """Capture une zone de l'écran."""
    return _get_backend().capture(input)


def capture_board(
    converter: Optional[CoordinateConverter] = None,
    save: bool = False,
    save_dir: Optional[str] = None,
) -> CaptureResult:
    """Capture la zone du tableau distribué."""
    converter = converter or CoordinateConverter()
    box = converter.board_box().translate(*converter.screen_offset)
    return capture_zone(CaptureInput(box=box, save=save, save_dir=save_dir))
