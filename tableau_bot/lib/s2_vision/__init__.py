"""Module s2_vision : Reconnaissance visuelle des cartes."""

from .types import VisionInput, VisionResult, CardMatch, MatchResult
from .vision import analyze, BoardVision
from .matcher import CardTemplateMatcher

__all__ = [
    # Types
    "VisionInput",
    "VisionResult",
    "CardMatch",
    "MatchResult",
    # Vision
    "analyze",
    "BoardVision",
    # Matcher
    "CardTemplateMatcher",
]
