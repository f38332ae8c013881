"""Adaptateurs perception (écran → plateau) et actuation (coups → entrées)."""

from __future__ import annotations

import os
from typing import List, Optional, Protocol, Sequence

from PIL import Image

from tableau_bot.lib.s0_coordinates import CoordinateConverter
from tableau_bot.lib.s0_input import InputDriver
from tableau_bot.lib.s1_capture import CaptureResult, capture_board
from tableau_bot.lib.s2_vision import BoardVision, VisionInput, VisionResult
from tableau_bot.lib.s3_state import GameState, Move
from tableau_bot.lib.s5_planner import Planner
from tableau_bot.lib.s6_executor import ExecutionResult, Executor, ExecutorInput
from tableau_bot.lib.s7_debug import DebugLogger, OverlayRenderer


class PerceptionAdapter(Protocol):
    def perceive(self) -> GameState: ...


class ActuationAdapter(Protocol):
    def replay(self, move: Move) -> None: ...


class ImagePerception:
    """Reconnaissance du plateau depuis une image déjà capturée."""

    def __init__(
        self,
        image: Image.Image,
        difficulty: int,
        vision: Optional[BoardVision] = None,
        overlay_dir: Optional[str] = None,
    ):
        self.image = image
        self.difficulty = difficulty
        self.vision = vision or BoardVision()
        self.overlay_dir = overlay_dir
        self.last_result: Optional[VisionResult] = None

    @classmethod
    def from_file(cls, path: str, difficulty: int, **kwargs) -> "ImagePerception":
        return cls(Image.open(path).convert("RGB"), difficulty, **kwargs)

    def perceive(self) -> GameState:
        result = self.vision.analyze(VisionInput(image=self.image, difficulty=self.difficulty))
        self.last_result = result
        print(f"[VISION] cartes={result.card_count} inconnues={result.unknown_count}")
        if self.overlay_dir:
            os.makedirs(self.overlay_dir, exist_ok=True)
            path = os.path.join(self.overlay_dir, "vision_overlay.png")
            renderer = OverlayRenderer(converter=self.vision.converter)
            renderer.render_vision_overlay(self.image, result, output_path=path)
            print(f"[VISION] overlay: {path}")
        if not result.is_complete:
            raise ValueError(
                f"Plateau incomplet: {result.card_count}/{result.expected_count} cartes reconnues, "
                f"{result.unknown_count} inconnues"
            )
        return result.to_game_state()


class ScreenPerception(ImagePerception):
    """Capture l'écran à chaque appel puis reconnaît le plateau."""

    def __init__(
        self,
        difficulty: int,
        converter: Optional[CoordinateConverter] = None,
        vision: Optional[BoardVision] = None,
        capture_dir: Optional[str] = None,
        overlay_dir: Optional[str] = None,
    ):
        self.converter = converter or CoordinateConverter()
        super().__init__(
            image=None,
            difficulty=difficulty,
            vision=vision or BoardVision(converter=self.converter),
            overlay_dir=overlay_dir,
        )
        self.capture_dir = capture_dir
        self.last_capture: Optional[CaptureResult] = None

    def perceive(self) -> GameState:
        capture = capture_board(
            self.converter,
            save=self.capture_dir is not None,
            save_dir=self.capture_dir,
        )
        self.last_capture = capture
        self.image = capture.image
        if capture.saved_path:
            print(f"[CAPTURE] {capture.saved_path}")
        if not capture.matches_box():
            print(f"[CAPTURE] taille {capture.size} différente de la zone {capture.box.to_tuple()}")
        return super().perceive()


class InputReplay:
    """Rejoue les coups à la souris en suivant l'état du plateau."""

    def __init__(
        self,
        driver: InputDriver,
        state: GameState,
        planner: Optional[Planner] = None,
        executor: Optional[Executor] = None,
        logger: Optional[DebugLogger] = None,
    ):
        self.driver = driver
        self.state = state
        self.planner = planner or Planner()
        self.executor = executor or Executor(driver)
        self.logger = logger
        self.replayed = 0

    def replay(self, move: Move) -> None:
        """Rejoue un coup ; lève l'erreur du driver en cas d'échec."""
        action = self.planner.plan_move(self.state, move, index=self.replayed)
        try:
            self.executor.execute_action(self.driver, action)
        except (OSError, RuntimeError, ValueError) as e:
            self._log(action, success=False, error=str(e))
            raise
        self._log(action, success=True)
        self.state = self.state.apply_move(move)
        self.replayed += 1

    def replay_all(self, moves: Sequence[Move]) -> ExecutionResult:
        """Rejoue une suite de coups d'un bloc via l'exécuteur."""
        plan = self.planner.plan(self.state, moves)
        result = self.executor.execute(ExecutorInput(plan=plan, driver=self.driver))

        done: List[Move] = list(moves)[:result.executed_count]
        for action in plan.actions[:result.executed_count]:
            self._log(action, success=True)
        for error, action in zip(result.errors, plan.actions[result.executed_count:]):
            self._log(action, success=False, error=error)
        for move in done:
            self.state = self.state.apply_move(move)
        self.replayed += len(done)
        return result

    def _log(self, action, success: bool, error: Optional[str] = None) -> None:
        if self.logger is None:
            return
        self.logger.log_move(
            index=action.index,
            move=str(action.move),
            start=action.start.to_tuple(),
            end=action.end.to_tuple(),
            success=success,
            error=error,
        )
