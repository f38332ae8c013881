"""Module s1_capture : Capture d'écran."""

from .capture import capture_zone, capture_board, ScreenCaptureBackend
from .types import CaptureInput, CaptureResult

__all__ = [
    "capture_zone",
    "capture_board",
    "ScreenCaptureBackend",
    "CaptureInput",
    "CaptureResult",
]
