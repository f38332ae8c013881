"""Exécuteur des glisser-déposer planifiés."""

import time
from typing import Optional

from tableau_bot.config import WAIT_TIMES
from tableau_bot.lib.s0_input import InputDriver, drag
from tableau_bot.lib.s5_planner import PlannedDrag
from .types import ExecutorInput, ExecutionResult


class Executor:
    """Exécuteur d'actions via un driver d'entrées."""

    def __init__(self, driver: Optional[InputDriver] = None):
        self.driver = driver
        self.move_delay = WAIT_TIMES['between_moves']
        self.drag_delay = WAIT_TIMES['drag_step']

    def set_driver(self, driver: InputDriver) -> None:
        """Configure le driver."""
        self.driver = driver

    def execute(self, input: ExecutorInput) -> ExecutionResult:
        """Exécute un plan d'actions."""
        if not input.plan.has_actions:
            return ExecutionResult(success=True, executed_count=0, duration=0.0)

        driver = input.driver or self.driver
        if not driver:
            return ExecutionResult(
                success=False,
                executed_count=0,
                errors=["Driver non configuré"],
            )

        move_delay = self.move_delay if input.move_delay is None else input.move_delay
        start_time = time.time()
        executed = 0
        errors = []
        failed_move = None

        for action in input.plan.actions:
            try:
                self.execute_action(driver, action)
                executed += 1
            except (OSError, RuntimeError, ValueError) as e:
                errors.append(f"Erreur sur {action.move}: {e}")
                failed_move = action.move
                # après un échec le plateau réel ne correspond plus au plan
                break

            if move_delay > 0:
                time.sleep(move_delay)

        return ExecutionResult(
            success=failed_move is None,
            executed_count=executed,
            errors=errors,
            failed_move=failed_move,
            duration=time.time() - start_time,
            metadata={
                "total_planned": input.plan.action_count,
                "move_delay": move_delay,
            },
        )

    def execute_action(self, driver: InputDriver, action: PlannedDrag) -> None:
        """Exécute un glisser-déposer."""
        drag(driver, action.start, action.end, delay=self.drag_delay)


# === API fonctionnelle ===

_default_executor: Optional[Executor] = None


def _get_executor() -> Executor:
    global _default_executor
    if _default_executor is None:
        _default_executor = Executor()
    return _default_executor


def set_executor_driver(driver: InputDriver) -> None:
    """Configure le driver pour l'exécuteur par défaut."""
    _get_executor().set_driver(driver)


def execute(input: ExecutorInput) -> ExecutionResult:
    """Exécute un plan d'actions."""
    return _get_executor().execute(input)
