"""Boucle de jeu : orchestration séquentielle des modules (boîtes noires).

Le game_loop ne gère que :
- L'ordre d'appel des modules (perception → solver → rejeu)
- Les logs de chaque étape
- Le résultat de la partie

Chaque module est autonome et gère sa propre logique interne.
"""

from __future__ import annotations

import threading
import time
from collections import Counter
from typing import Any, Dict, Optional

from tableau_bot.config import RUN_LENGTH
from tableau_bot.lib.s3_state import GameState
from tableau_bot.lib.s4_solver import Solver, SolverStatus
from tableau_bot.lib.s7_debug import DebugLogger
from .adapters import InputReplay, PerceptionAdapter
from .s0_session_service import Session


class GameLoop:
    """Pipeline d'une partie : perception, résolution, rejeu."""

    def __init__(
        self,
        perception: PerceptionAdapter,
        session: Optional[Session] = None,
        solver: Optional[Solver] = None,
        logger: Optional[DebugLogger] = None,
    ):
        self.perception = perception
        self.session = session
        self.solver = solver or Solver()
        self.logger = logger

    def run(
        self,
        replay: bool = True,
        cancel_event: Optional[threading.Event] = None,
    ) -> Dict[str, Any]:
        """Exécute la partie complète et retourne un résumé."""
        start_time = time.time()

        # 1. Perception
        state = self.perception.perceive()
        print(f"[STATE] colonnes={state.column_count} cases={state.slot_count} cartes={state.card_count}")
        self._check_board(state)

        # 2. Solver
        output = self.solver.solve(state, cancel_event=cancel_event)
        stats = output.stats
        print(
            f"[SOLVER] {output.status.name} coups={output.move_count} "
            f"noeuds={stats.nodes_expanded} visités={stats.states_visited} "
            f"durée={stats.duration:.2f}s"
        )
        if self.logger:
            self.logger.log_solver(output, board=state.to_dict())

        result: Dict[str, Any] = {
            "success": output.solved,
            "status": output.status.name,
            "moves": [str(m) for m in output.moves],
            "executed": 0,
            "stats": {
                "nodes_expanded": stats.nodes_expanded,
                "states_visited": stats.states_visited,
                "max_depth": stats.max_depth,
                "solver_duration": stats.duration,
            },
        }

        if output.status is not SolverStatus.SOLVED:
            result["duration"] = time.time() - start_time
            return result

        # 3. Rejeu
        if replay:
            if self.session is None:
                raise RuntimeError("Pas de session active pour rejouer les coups")
            actuation = InputReplay(self.session.driver, state, logger=self.logger)
            execution = actuation.replay_all(output.moves)
            print(f"[REPLAY] {execution.executed_count}/{len(output.moves)} coups rejoués")
            for error in execution.errors:
                print(f"[REPLAY] {error}")
            result["executed"] = execution.executed_count
            result["success"] = execution.success
        else:
            for i, move in enumerate(output.moves, start=1):
                print(f"[MOVE] {i:3d}. {move}")

        result["duration"] = time.time() - start_time
        return result

    @staticmethod
    def _check_board(state: GameState) -> None:
        """Refuse un plateau vide ou dont une face n'apparaît pas RUN_LENGTH fois."""
        if state.card_count == 0:
            raise ValueError("Plateau vide : rien à résoudre")
        counts = Counter(card for pile in state.columns + state.slots for card in pile)
        wrong = sorted(card for card, count in counts.items() if count != RUN_LENGTH)
        if wrong:
            raise ValueError(f"Plateau incohérent : faces {wrong} sans {RUN_LENGTH} exemplaires")


# === API fonctionnelle ===

def run_game(
    perception: PerceptionAdapter,
    session: Optional[Session] = None,
    replay: bool = True,
    logger: Optional[DebugLogger] = None,
    solver_config: Optional[Dict[str, Any]] = None,
    cancel_event: Optional[threading.Event] = None,
) -> Dict[str, Any]:
    """Exécute une partie complète."""
    loop = GameLoop(perception, session=session, solver=Solver(solver_config), logger=logger)
    return loop.run(replay=replay, cancel_event=cancel_event)
