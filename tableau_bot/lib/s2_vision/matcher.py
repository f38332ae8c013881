"""Template matcher pour la reconnaissance des cartes."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

import numpy as np
from PIL import Image

from tableau_bot.config import CARD_SAMPLE_SIZE, CARD_VALUES, VISION_CONFIG
from .types import MatchResult


class CardTemplateMatcher:
    """Classification d'un échantillon par distance aux templates de cartes."""

    def __init__(
        self,
        templates_dir: Optional[str | Path] = None,
        card_values: int = CARD_VALUES,
        sample_size: int = CARD_SAMPLE_SIZE,
        threshold: float = VISION_CONFIG['match_threshold'],
    ):
        self.templates_dir = Path(templates_dir or VISION_CONFIG['templates_dir'])
        self.card_values = card_values
        self.sample_size = sample_size
        self.threshold = float(threshold)
        self.templates: Dict[int, np.ndarray] = {}
        self._load_templates()

    def _load_templates(self) -> None:
        """Charge un template PNG par face (0.png, 1.png, ...)."""
        if not self.templates_dir.is_dir():
            raise FileNotFoundError(f"Dossier de templates introuvable: {self.templates_dir}")

        for card in range(self.card_values):
            path = self.templates_dir / f"{card}.png"
            if not path.exists():
                raise FileNotFoundError(f"Template manquant: {path}")
            template = self._to_rgb_array(Image.open(path))
            if template.shape[:2] != (self.sample_size, self.sample_size):
                raise ValueError(
                    f"Template {path.name} de taille {template.shape[1]}x{template.shape[0]}, "
                    f"attendu {self.sample_size}x{self.sample_size}"
                )
            self.templates[card] = template

    def classify_patch(self, patch: Image.Image | np.ndarray) -> MatchResult:
        """Classifie un échantillon : template le plus proche sous le seuil."""
        patch_rgb = self._to_rgb_array(patch)
        if patch_rgb.shape[:2] != (self.sample_size, self.sample_size):
            raise ValueError(f"patch doit être de taille {self.sample_size}x{self.sample_size}")

        distances: Dict[int, float] = {}
        for card, template in self.templates.items():
            distances[card] = float(np.linalg.norm(patch_rgb - template))

        best_card = min(distances, key=distances.get)
        best_distance = distances[best_card]

        return MatchResult(
            card=best_card if best_distance <= self.threshold else None,
            distance=best_distance,
            threshold=self.threshold,
            distances=distances,
        )

    @staticmethod
    def _to_rgb_array(image: Image.Image | np.ndarray) -> np.ndarray:
        if isinstance(image, Image.Image):
            return np.array(image.convert("RGB"), dtype=np.float32)
        arr = np.asarray(image, dtype=np.float32)
        if arr.ndim == 2:
            arr = np.repeat(arr[:, :, None], 3, axis=2)
        return arr[:, :, :3]
