"""Module s4_solver : Résolution du tableau (coups légaux + score + recherche)."""

from .types import SolverOutput, SolverStatus, SolverStats, Candidate
from .moves import available_moves, top_run_length, is_locked
from .scorer import is_solved, score, win_threshold, win_threshold_for
from .solver import solve, Solver

__all__ = [
    # Types
    "SolverOutput",
    "SolverStatus",
    "SolverStats",
    "Candidate",
    # Coups
    "available_moves",
    "top_run_length",
    "is_locked",
    # Score
    "score",
    "win_threshold",
    "win_threshold_for",
    "is_solved",
    # Solver
    "solve",
    "Solver",
]
