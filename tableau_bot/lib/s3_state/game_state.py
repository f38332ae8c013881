"""État du plateau : colonnes, cases de réserve et clé canonique."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Iterable, List, Sequence, Tuple

from tableau_bot.config import MAX_SLOTS
from .types import Card, Location, Move, Pile, PileKind

# Fin de pile dans la clé canonique
PILE_SENTINEL = "T"


def slot_count_for(difficulty: int) -> int:
    """Nombre de cases de réserve pour un niveau de difficulté (0..3)."""
    if not 0 <= difficulty < MAX_SLOTS:
        raise ValueError(f"Niveau de difficulté invalide: {difficulty}")
    return MAX_SLOTS - difficulty


def _render_pile(pile: Pile) -> str:
    return "".join(f"{card}." for card in pile) + PILE_SENTINEL


@dataclass(frozen=True, eq=False)
class GameState:
    """
    Instantané immuable du plateau.

    Deux états sont égaux si et seulement si leurs clés canoniques le sont :
    l'ordre des colonnes entre elles, et celui des cases entre elles, est ignoré.
    """
    columns: Tuple[Pile, ...]
    slots: Tuple[Pile, ...]
    difficulty: int = 0

    @classmethod
    def from_piles(
        cls,
        columns: Iterable[Sequence[Card]],
        difficulty: int = 0,
        slots: Iterable[Sequence[Card]] | None = None,
    ) -> "GameState":
        """Construit un état depuis des listes de cartes (bas → sommet)."""
        if slots is None:
            slots = [() for _ in range(slot_count_for(difficulty))]
        return cls(
            columns=tuple(tuple(column) for column in columns),
            slots=tuple(tuple(slot) for slot in slots),
            difficulty=difficulty,
        )

    @property
    def column_count(self) -> int:
        return len(self.columns)

    @property
    def slot_count(self) -> int:
        return len(self.slots)

    @property
    def card_count(self) -> int:
        return sum(len(p) for p in self.columns) + sum(len(p) for p in self.slots)

    def pile(self, location: Location) -> Pile:
        """Retourne la pile désignée par `location`."""
        piles = self.columns if location.kind is PileKind.COLUMN else self.slots
        if not 0 <= location.index < len(piles):
            raise ValueError(f"Pile inexistante: {location}")
        return piles[location.index]

    def apply_move(self, move: Move) -> "GameState":
        """
        Retourne l'état obtenu après `move`.

        Le coup n'est pas revalidé : il doit provenir de available_moves().
        Un coup impossible (pile vide, pas assez de cartes) lève ValueError.
        """
        if move.source == move.target:
            raise ValueError(f"Source et destination identiques: {move}")
        source = self.pile(move.source)
        target = self.pile(move.target)
        if len(source) < move.count:
            raise ValueError(
                f"Pas assez de cartes sur {move.source}: {len(source)} < {move.count}"
            )

        moved = source[len(source) - move.count:]
        columns: List[Pile] = list(self.columns)
        slots: List[Pile] = list(self.slots)
        self._piles_of(move.source, columns, slots)[move.source.index] = source[:len(source) - move.count]
        self._piles_of(move.target, columns, slots)[move.target.index] = target + moved

        return GameState(columns=tuple(columns), slots=tuple(slots), difficulty=self.difficulty)

    @cached_property
    def canonical_key(self) -> str:
        """Sérialisation indépendante de l'ordre des colonnes et des cases."""
        column_block = "".join(sorted(_render_pile(p) for p in self.columns))
        slot_block = "".join(sorted(_render_pile(p) for p in self.slots))
        return f"{column_block}|{slot_block}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return self.canonical_key == other.canonical_key

    def __hash__(self) -> int:
        return hash(self.canonical_key)

    def to_dict(self) -> dict:
        return {
            "columns": [list(p) for p in self.columns],
            "slots": [list(p) for p in self.slots],
            "difficulty": self.difficulty,
        }

    @staticmethod
    def _piles_of(location: Location, columns: List[Pile], slots: List[Pile]) -> List[Pile]:
        return columns if location.kind is PileKind.COLUMN else slots
