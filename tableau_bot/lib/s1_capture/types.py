"""Types pour le module s1_capture."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from PIL import Image

from tableau_bot.lib.s0_coordinates import ScreenBox


@dataclass
class CaptureInput:
    """Zone à capturer, en coordonnées écran absolues."""
    box: ScreenBox
    save: bool = False
    filename: Optional[str] = None
    save_dir: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass
class CaptureResult:
    """Image capturée et zone demandée."""
    image: Image.Image
    box: ScreenBox
    timestamp: float = 0.0
    saved_path: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def size(self) -> Tuple[int, int]:
        return self.image.size

    def matches_box(self) -> bool:
        """Faux si l'écran est mis à l'échelle (DPI) : les échantillons seraient décalés."""
        return self.image.size == (self.box.width, self.box.height)
