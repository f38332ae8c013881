"""Types pour le module s5_planner."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from tableau_bot.lib.s0_coordinates import ScreenPoint
from tableau_bot.lib.s3_state import Move


@dataclass
class PlannedDrag:
    """Coup traduit en glisser-déposer écran."""
    move: Move
    start: ScreenPoint
    end: ScreenPoint
    index: int = 0

    def to_tuple(self) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        return (self.start.to_tuple(), self.end.to_tuple())


@dataclass
class ExecutionPlan:
    """Plan d'exécution ordonné."""
    actions: List[PlannedDrag]
    estimated_time: float = 0.0
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def action_count(self) -> int:
        return len(self.actions)

    @property
    def has_actions(self) -> bool:
        return len(self.actions) > 0
