"""Module s3_state : Modèle du plateau (cartes, piles, coups)."""

from .types import Card, Pile, PileKind, Location, Move
from .game_state import GameState, slot_count_for

__all__ = [
    # Types
    "Card",
    "Pile",
    "PileKind",
    "Location",
    "Move",
    # État
    "GameState",
    "slot_count_for",
]
