"""Module s7_debug : Debug et overlays visuels."""

from .overlays import OverlayRenderer, render_vision_overlay
from .logger import DebugLogger, log_solver, log_move

__all__ = [
    "OverlayRenderer",
    "render_vision_overlay",
    "DebugLogger",
    "log_solver",
    "log_move",
]
