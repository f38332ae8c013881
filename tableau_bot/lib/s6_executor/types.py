"""Types pour le module s6_executor."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from tableau_bot.lib.s0_input import InputDriver
from tableau_bot.lib.s3_state import Move
from tableau_bot.lib.s5_planner import ExecutionPlan


@dataclass
class ExecutorInput:
    """Plan à rejouer, avec un driver et une pause entre coups optionnels."""
    plan: ExecutionPlan
    driver: Optional[InputDriver] = None
    move_delay: Optional[float] = None


@dataclass
class ExecutionResult:
    """Bilan du rejeu : coups joués, et le premier coup en échec s'il y en a un."""
    success: bool
    executed_count: int
    errors: List[str] = field(default_factory=list)
    failed_move: Optional[Move] = None
    duration: float = 0.0
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def error_count(self) -> int:
        return len(self.errors)
