"""Génération des coups légaux."""

from typing import List

from tableau_bot.config import RUN_LENGTH
from tableau_bot.lib.s3_state import GameState, Location, Move, Pile


def top_run_length(pile: Pile, cap: int = RUN_LENGTH) -> int:
    """Longueur (plafonnée) de la suite de cartes identiques au sommet."""
    if not pile:
        return 0
    top = pile[-1]
    count = 0
    for card in reversed(pile[-cap:]):
        if card != top:
            break
        count += 1
    return count


def is_locked(pile: Pile) -> bool:
    """Colonne de exactement RUN_LENGTH cartes identiques : inerte."""
    return len(pile) == RUN_LENGTH and top_run_length(pile) == RUN_LENGTH


def available_moves(state: GameState) -> List[Move]:
    """Énumère tous les coups légaux (ordre déterministe)."""
    moves: List[Move] = []

    # Colonne -> colonne / colonne -> case
    for src, column in enumerate(state.columns):
        if not column:
            continue

        max_run = top_run_length(column)
        if is_locked(column):
            continue

        source = Location.column(src)
        top = column[-1]
        for dst, other in enumerate(state.columns):
            if dst == src:
                continue
            if not other or other[-1] == top:
                for count in range(1, max_run + 1):
                    moves.append(Move(source, Location.column(dst), count))

        for dst, slot in enumerate(state.slots):
            if slot:
                continue
            moves.append(Move(source, Location.slot(dst), 1))
            # une suite complète peut être rangée d'un bloc
            if max_run == RUN_LENGTH:
                moves.append(Move(source, Location.slot(dst), RUN_LENGTH))

    # Case -> colonne (uniquement une case contenant une seule carte)
    for src, slot in enumerate(state.slots):
        if len(slot) != 1:
            continue
        source = Location.slot(src)
        for dst, column in enumerate(state.columns):
            if not column or column[-1] == slot[0]:
                moves.append(Move(source, Location.column(dst), 1))

    return moves
