"""Module s5_planner : Planification des glisser-déposer."""

from .types import ExecutionPlan, PlannedDrag
from .planner import plan, Planner, set_planner_converter

__all__ = [
    "ExecutionPlan",
    "PlannedDrag",
    "plan",
    "Planner",
    "set_planner_converter",
]
