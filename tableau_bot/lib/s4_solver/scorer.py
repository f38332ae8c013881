"""Heuristique de score et seuil de victoire."""

from tableau_bot.config import RUN_LENGTH
from tableau_bot.lib.s3_state import GameState
from .moves import top_run_length


def score(state: GameState) -> int:
    """Score glouton : récompense les longues suites et les cases remplies."""
    total = 0
    for column in state.columns:
        total += 2 ** top_run_length(column)
    for slot in state.slots:
        total += 2 ** len(slot)
    return total


def win_threshold(column_count: int, slot_count: int, card_count: int) -> int:
    """
    Score d'un plateau rangé : chaque suite complète occupe une pile
    (colonne ou case), les piles restantes sont vides.
    """
    runs = card_count // RUN_LENGTH
    containers = column_count + slot_count
    filled = min(runs, containers)
    return filled * 2 ** RUN_LENGTH + (containers - filled)


def win_threshold_for(state: GameState) -> int:
    return win_threshold(state.column_count, state.slot_count, state.card_count)


def is_solved(state: GameState) -> bool:
    """Chaque pile non vide n'est faite que de suites complètes de cartes identiques."""
    for pile in state.columns + state.slots:
        if len(pile) % RUN_LENGTH:
            return False
        for start in range(0, len(pile), RUN_LENGTH):
            if len(set(pile[start:start + RUN_LENGTH])) != 1:
                return False
    return True
