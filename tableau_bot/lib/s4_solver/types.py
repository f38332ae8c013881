"""Types pour le module s4_solver."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, List

from tableau_bot.lib.s3_state import GameState, Move


class SolverStatus(Enum):
    """Issue d'une recherche."""
    SOLVED = auto()
    EXHAUSTED = auto()
    CANCELLED = auto()


@dataclass
class Candidate:
    """Successeur d'un état, prêt à être exploré."""
    move: Move
    state: GameState
    score: int

    @property
    def key(self) -> str:
        return self.state.canonical_key


@dataclass
class SolverStats:
    """Statistiques de résolution."""
    nodes_expanded: int = 0
    states_visited: int = 0
    max_depth: int = 0
    duration: float = 0.0
    win_threshold: int = 0
    initial_score: int = 0


@dataclass
class SolverOutput:
    """Output du solver."""
    status: SolverStatus
    moves: List[Move]
    stats: SolverStats
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def solved(self) -> bool:
        return self.status is SolverStatus.SOLVED

    @property
    def move_count(self) -> int:
        return len(self.moves)
