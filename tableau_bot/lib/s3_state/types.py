"""Types pour le module s3_state."""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from tableau_bot.config import RUN_LENGTH

# Une carte n'est qu'une identité (0..CARD_VALUES-1), sans couleur ni ordre.
Card = int
Pile = Tuple[Card, ...]


class PileKind(Enum):
    """Nature d'une pile du plateau."""
    COLUMN = "column"
    SLOT = "slot"


@dataclass(frozen=True)
class Location:
    """Référence vers une colonne ou une case de réserve."""
    kind: PileKind
    index: int

    @classmethod
    def column(cls, index: int) -> "Location":
        return cls(PileKind.COLUMN, index)

    @classmethod
    def slot(cls, index: int) -> "Location":
        return cls(PileKind.SLOT, index)

    @property
    def is_column(self) -> bool:
        return self.kind is PileKind.COLUMN

    @property
    def is_slot(self) -> bool:
        return self.kind is PileKind.SLOT

    def __str__(self) -> str:
        return f"{self.kind.value}[{self.index}]"


@dataclass(frozen=True)
class Move:
    """Déplacement de `count` cartes du sommet de `source` vers `target`."""
    source: Location
    target: Location
    count: int = 1

    def __post_init__(self):
        if not 1 <= self.count <= RUN_LENGTH:
            raise ValueError(f"Nombre de cartes invalide: {self.count} (attendu 1..{RUN_LENGTH})")

    def to_tuple(self) -> Tuple[str, str, int]:
        return (str(self.source), str(self.target), self.count)

    def __str__(self) -> str:
        return f"{self.source} -> {self.target} x{self.count}"
