"""Logger structuré pour le debug."""

import json
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Any


@dataclass
class SolverLog:
    """Log d'une résolution."""
    timestamp: str
    status: str
    moves_count: int
    nodes_expanded: int
    states_visited: int
    max_depth: int
    duration: float
    win_threshold: int
    initial_score: int
    board: Dict[str, Any]


@dataclass
class MoveLog:
    """Log d'un coup rejoué."""
    timestamp: str
    index: int
    move: str
    start: tuple
    end: tuple
    success: bool
    error: Optional[str] = None


class DebugLogger:
    """Logger structuré pour le debug."""

    def __init__(self, log_dir: str = "logs"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.session_id = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.solves: List[SolverLog] = []
        self.moves: List[MoveLog] = []

    def log_solver(self, solver_output, board: Optional[Dict[str, Any]] = None) -> None:
        """Log une résolution (SolverOutput)."""
        stats = solver_output.stats
        log = SolverLog(
            timestamp=datetime.now().isoformat(),
            status=solver_output.status.name,
            moves_count=len(solver_output.moves),
            nodes_expanded=stats.nodes_expanded,
            states_visited=stats.states_visited,
            max_depth=stats.max_depth,
            duration=stats.duration,
            win_threshold=stats.win_threshold,
            initial_score=stats.initial_score,
            board=board or {},
        )
        self.solves.append(log)
        self._write_log("solver", asdict(log))

    def log_move(
        self,
        index: int,
        move: str,
        start: tuple,
        end: tuple,
        success: bool = True,
        error: Optional[str] = None,
    ) -> None:
        """Log un coup rejoué."""
        log = MoveLog(
            timestamp=datetime.now().isoformat(),
            index=index,
            move=move,
            start=start,
            end=end,
            success=success,
            error=error,
        )
        self.moves.append(log)
        self._write_log("moves", asdict(log))

    def save_session(self) -> str:
        """Sauvegarde la session complète."""
        session_file = self.log_dir / f"session_{self.session_id}.json"
        data = {
            "session_id": self.session_id,
            "summary": self.get_summary(),
            "solves": [asdict(s) for s in self.solves],
            "moves": [asdict(m) for m in self.moves],
        }
        with open(session_file, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        return str(session_file)

    def get_summary(self) -> Dict[str, Any]:
        """Retourne un résumé de la session."""
        return {
            "session_id": self.session_id,
            "solves": len(self.solves),
            "solved": sum(1 for s in self.solves if s.status == "SOLVED"),
            "nodes_expanded": sum(s.nodes_expanded for s in self.solves),
            "solver_duration": sum(s.duration for s in self.solves),
            "moves_replayed": sum(1 for m in self.moves if m.success),
            "moves_failed": sum(1 for m in self.moves if not m.success),
        }

    def _write_log(self, log_type: str, data: Dict[str, Any]) -> None:
        """Écrit un log dans un fichier."""
        log_file = self.log_dir / f"{log_type}_{self.session_id}.jsonl"
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(json.dumps(data, ensure_ascii=False) + "\n")


# === API fonctionnelle ===

_logger: Optional[DebugLogger] = None


def _get_logger() -> DebugLogger:
    global _logger
    if _logger is None:
        _logger = DebugLogger()
    return _logger


def log_solver(solver_output, board: Optional[Dict[str, Any]] = None) -> None:
    """Log une résolution."""
    _get_logger().log_solver(solver_output, board)


def log_move(
    index: int,
    move: str,
    start: tuple,
    end: tuple,
    success: bool = True,
    error: Optional[str] = None,
) -> None:
    """Log un coup rejoué."""
    _get_logger().log_move(index, move, start, end, success, error)
