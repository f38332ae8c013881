"""Services du bot Tableau."""

from .s0_session_service import Session, SessionService, create_session, get_current_session, resolve_difficulty
from .s9_game_loop import GameLoop, run_game
from .adapters import (
    PerceptionAdapter,
    ActuationAdapter,
    ImagePerception,
    ScreenPerception,
    InputReplay,
)

__all__ = [
    "Session",
    "SessionService",
    "create_session",
    "get_current_session",
    "resolve_difficulty",
    "GameLoop",
    "run_game",
    "PerceptionAdapter",
    "ActuationAdapter",
    "ImagePerception",
    "ScreenPerception",
    "InputReplay",
]
