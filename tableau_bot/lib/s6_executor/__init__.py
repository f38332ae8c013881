"""Module s6_executor : Exécution des coups via les entrées synthétiques."""

from .types import ExecutorInput, ExecutionResult
from .executor import execute, Executor, set_executor_driver

__all__ = [
    "ExecutorInput",
    "ExecutionResult",
    "execute",
    "Executor",
    "set_executor_driver",
]
