"""Types pour le module s2_vision."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from PIL import Image

from tableau_bot.config import COLUMN_COUNT, COLUMN_DEPTH, DEFAULT_DIFFICULTY, DIFFICULTY_CONFIG
from tableau_bot.lib.s3_state import GameState


@dataclass
class MatchResult:
    """Résultat de classification d'un échantillon."""
    card: Optional[int]
    distance: float
    threshold: float
    distances: Dict[int, float]

    @property
    def is_known(self) -> bool:
        return self.card is not None

    @property
    def confidence(self) -> float:
        if self.threshold <= 0:
            return 1.0 if self.distance == 0 else 0.0
        return max(0.0, 1.0 - (self.distance / (self.threshold + 1e-6)))


@dataclass
class CardMatch:
    """Carte reconnue à une position du tableau."""
    column: int
    depth: int
    card: Optional[int]
    confidence: float
    distance: float = 0.0

    @classmethod
    def from_match_result(cls, column: int, depth: int, result: MatchResult) -> "CardMatch":
        return cls(
            column=column,
            depth=depth,
            card=result.card,
            confidence=result.confidence,
            distance=result.distance,
        )


@dataclass
class VisionInput:
    """Input pour l'analyse vision (image = zone board_box du converter)."""
    image: Image.Image
    difficulty: int = DIFFICULTY_CONFIG[DEFAULT_DIFFICULTY]['level']
    columns: int = COLUMN_COUNT
    depth: int = COLUMN_DEPTH


@dataclass
class VisionResult:
    """Résultat de l'analyse vision."""
    matches: List[CardMatch]
    columns: List[List[int]]
    difficulty: int
    expected_count: int = COLUMN_COUNT * COLUMN_DEPTH
    timestamp: float = 0.0
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def card_count(self) -> int:
        return sum(len(c) for c in self.columns)

    @property
    def unknown_count(self) -> int:
        return sum(1 for m in self.matches if m.card is None)

    @property
    def is_complete(self) -> bool:
        """Toutes les positions distribuées ont été reconnues."""
        return self.unknown_count == 0 and self.card_count == self.expected_count

    def to_game_state(self) -> GameState:
        return GameState.from_piles(self.columns, difficulty=self.difficulty)
