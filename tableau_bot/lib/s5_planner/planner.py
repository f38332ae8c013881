"""Planner : traduction des coups en glisser-déposer écran."""

from typing import List, Optional, Sequence

from tableau_bot.config import WAIT_TIMES
from tableau_bot.lib.s0_coordinates import CoordinateConverter
from tableau_bot.lib.s3_state import GameState, Move
from .types import ExecutionPlan, PlannedDrag


class Planner:
    """Planificateur de glisser-déposer."""

    def __init__(self, converter: Optional[CoordinateConverter] = None):
        self.converter = converter or CoordinateConverter()

    def set_converter(self, converter: CoordinateConverter) -> None:
        """Configure le convertisseur de coordonnées."""
        self.converter = converter

    def plan_move(self, state: GameState, move: Move, index: int = 0) -> PlannedDrag:
        """
        Traduit un coup joué sur `state`.

        On saisit la carte la plus basse du bloc déplacé, et on la dépose
        juste au-dessus du sommet actuel de la destination.
        """
        source_height = len(state.pile(move.source))
        target_height = len(state.pile(move.target))
        start = self.converter.location_point(move.source, source_height - move.count)
        end = self.converter.location_point(move.target, target_height)
        return PlannedDrag(move=move, start=start, end=end, index=index)

    def plan(self, state: GameState, moves: Sequence[Move]) -> ExecutionPlan:
        """Planifie une suite de coups en simulant le plateau."""
        if not moves:
            return ExecutionPlan(actions=[], estimated_time=0.0)

        planned: List[PlannedDrag] = []
        current = state
        for i, move in enumerate(moves):
            planned.append(self.plan_move(current, move, index=i))
            current = current.apply_move(move)

        per_action = 4 * WAIT_TIMES['drag_step'] + WAIT_TIMES['between_moves']
        return ExecutionPlan(
            actions=planned,
            estimated_time=len(planned) * per_action,
            metadata={
                "total_actions": len(planned),
                "to_slots": len([a for a in planned if a.move.target.is_slot]),
                "from_slots": len([a for a in planned if a.move.source.is_slot]),
            },
        )


# === API fonctionnelle ===

_default_planner: Optional[Planner] = None


def _get_planner() -> Planner:
    global _default_planner
    if _default_planner is None:
        _default_planner = Planner()
    return _default_planner


def set_planner_converter(converter: CoordinateConverter) -> None:
    """Configure le convertisseur pour le planner par défaut."""
    _get_planner().set_converter(converter)


def plan(state: GameState, moves: Sequence[Move]) -> ExecutionPlan:
    """Planifie l'exécution des coups."""
    return _get_planner().plan(state, moves)
