"""Solver principal : recherche en profondeur gloutonne avec états visités."""

import threading
import time
from typing import Any, Dict, Iterator, List, Optional, Set

from tableau_bot.config import SOLVER_CONFIG
from tableau_bot.lib.s3_state import GameState, Move
from .moves import available_moves
from .scorer import is_solved, score, win_threshold_for
from .types import Candidate, SolverOutput, SolverStats, SolverStatus


class Solver:
    """
    Recherche en profondeur d'abord, meilleurs scores en premier.

    Un état canonique visité n'est jamais ré-exploré, quel que soit le chemin
    qui y mène. La pile de travail explicite remplace la récursion : chaque
    niveau garde un itérateur sur ses candidats triés, et `path` contient
    exactement les coups menant à l'état du sommet de pile.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = {**SOLVER_CONFIG, **(config or {})}
        self.timeout: Optional[float] = self.config.get("timeout")

    def solve(
        self,
        state: GameState,
        cancel_event: Optional[threading.Event] = None,
    ) -> SolverOutput:
        """Cherche une suite de coups menant au seuil de victoire."""
        start_time = time.time()
        threshold = win_threshold_for(state)
        stats = SolverStats(win_threshold=threshold, initial_score=score(state))

        if stats.initial_score == threshold and is_solved(state):
            return self._finish(SolverStatus.SOLVED, [], stats, start_time)

        visited: Set[str] = {state.canonical_key}
        path: List[Move] = []
        stack: List[Iterator[Candidate]] = [iter(self._expand(state, visited, stats))]

        while stack:
            if self._should_stop(cancel_event, start_time):
                stats.states_visited = len(visited)
                return self._finish(SolverStatus.CANCELLED, list(path), stats, start_time)

            candidate = next(stack[-1], None)
            if candidate is None:
                # niveau épuisé : on annule le coup qui y menait
                stack.pop()
                if path:
                    path.pop()
                continue

            # un frère exploré plus tôt a pu atteindre cet état
            if candidate.key in visited:
                continue

            if candidate.score == threshold and is_solved(candidate.state):
                path.append(candidate.move)
                stats.states_visited = len(visited) + 1
                return self._finish(SolverStatus.SOLVED, list(path), stats, start_time)

            visited.add(candidate.key)
            path.append(candidate.move)
            stats.max_depth = max(stats.max_depth, len(path))
            stack.append(iter(self._expand(candidate.state, visited, stats)))

        stats.states_visited = len(visited)
        return self._finish(SolverStatus.EXHAUSTED, [], stats, start_time)

    def _expand(self, state: GameState, visited: Set[str], stats: SolverStats) -> List[Candidate]:
        """Successeurs non visités, triés par score décroissant (tri stable)."""
        stats.nodes_expanded += 1
        candidates = []
        for move in available_moves(state):
            next_state = state.apply_move(move)
            if next_state.canonical_key in visited:
                continue
            candidates.append(Candidate(move=move, state=next_state, score=score(next_state)))
        candidates.sort(key=lambda c: c.score, reverse=True)
        return candidates

    def _should_stop(self, cancel_event: Optional[threading.Event], start_time: float) -> bool:
        if cancel_event is not None and cancel_event.is_set():
            return True
        return self.timeout is not None and time.time() - start_time > self.timeout

    @staticmethod
    def _finish(
        status: SolverStatus,
        moves: List[Move],
        stats: SolverStats,
        start_time: float,
    ) -> SolverOutput:
        stats.duration = time.time() - start_time
        return SolverOutput(
            status=status,
            moves=moves,
            stats=stats,
            metadata={"solution_length": len(moves)},
        )


# === API fonctionnelle ===

_default_solver: Optional[Solver] = None


def _get_solver() -> Solver:
    global _default_solver
    if _default_solver is None:
        _default_solver = Solver()
    return _default_solver


def solve(state: GameState, cancel_event: Optional[threading.Event] = None) -> SolverOutput:
    """Résout le plateau (API fonctionnelle)."""
    return _get_solver().solve(state, cancel_event)
