"""
Tests unitaires pour la chaîne d'actuation (coordonnées, planner, exécuteur, rejeu)
"""

import json
import sys
from pathlib import Path

import pytest

from tableau_bot.lib.s0_coordinates import CoordinateConverter, ScreenPoint
from tableau_bot.lib.s0_input import (
    RecordingInputDriver,
    Win32InputDriver,
    drag,
    press_shortcut,
    virtual_key,
)
from tableau_bot.lib.s3_state import GameState, Location, Move
from tableau_bot.lib.s5_planner import Planner
from tableau_bot.lib.s6_executor import Executor, ExecutorInput
from tableau_bot.lib.s7_debug import DebugLogger
from tableau_bot.services import InputReplay


class FailingDriver(RecordingInputDriver):
    """Driver dont le bouton de souris ne répond plus"""

    def mouse_down(self) -> None:
        raise RuntimeError("bouton bloqué")


class StuckMoveDriver(RecordingInputDriver):
    """Driver dont le curseur ne bouge plus une fois le bouton enfoncé"""

    def move_to(self, x: int, y: int) -> None:
        if "down" in self.kinds():
            raise OSError("curseur bloqué")
        super().move_to(x, y)

    def key_down(self, key: str) -> None:
        if key != "ctrl":
            raise OSError("touche refusée")
        super().key_down(key)


def fast_executor(driver=None) -> Executor:
    executor = Executor(driver)
    executor.move_delay = 0
    executor.drag_delay = 0
    return executor


def make_state(columns, slots) -> GameState:
    return GameState.from_piles(columns, slots=slots)


class TestCoordinateConverter:
    """Tests pour la conversion plateau → écran"""

    def test_card_point(self):
        converter = CoordinateConverter()

        assert converter.card_point(0, 0) == ScreenPoint(2400, 484)
        assert converter.card_point(2, 3) == ScreenPoint(2400 + 256, 484 + 90)

    def test_slot_point_ignores_depth(self):
        converter = CoordinateConverter()

        assert converter.slot_point(1) == ScreenPoint(2528, 310)
        assert converter.location_point(Location.slot(1), 3) == converter.slot_point(1)

    def test_custom_offset(self):
        converter = CoordinateConverter(screen_offset=(0, 0))

        assert converter.card_point(0, 0) == ScreenPoint(480, 484)

    def test_board_box(self):
        box = CoordinateConverter().board_box()

        assert box.to_tuple() == (470, 474, 470 + 7 * 128 + 20, 474 + 4 * 30 + 20)
        assert CoordinateConverter().sample_boxes()[(0, 0)].to_tuple() == (0, 0, 20, 20)


class TestInputActions:
    """Tests pour les actions composées"""

    def test_drag_sequence(self):
        driver = RecordingInputDriver()
        drag(driver, ScreenPoint(10, 20), ScreenPoint(30, 40), delay=0)

        assert driver.kinds() == ["move", "down", "move", "up"]
        assert driver.events[1].position == (10, 20)
        assert driver.events[3].position == (30, 40)

    def test_drag_releases_button_on_failure(self):
        driver = StuckMoveDriver()

        with pytest.raises(OSError):
            drag(driver, ScreenPoint(10, 20), ScreenPoint(30, 40), delay=0)

        assert driver.kinds() == ["move", "down", "up"]

    def test_shortcut_releases_modifier_on_failure(self):
        driver = StuckMoveDriver()

        with pytest.raises(OSError):
            press_shortcut(driver, "n", delay=0)

        assert [(e.kind, e.key) for e in driver.events] == [("key_down", "ctrl"), ("key_up", "ctrl")]

    def test_press_shortcut(self):
        driver = RecordingInputDriver()
        press_shortcut(driver, "n", delay=0)

        assert [(e.kind, e.key) for e in driver.events] == [
            ("key_down", "ctrl"),
            ("key_down", "n"),
            ("key_up", "n"),
            ("key_up", "ctrl"),
        ]

    def test_virtual_keys(self):
        assert virtual_key("ctrl") == 0x11
        assert virtual_key("n") == 0x4E
        assert virtual_key("N") == 0x4E
        with pytest.raises(ValueError):
            virtual_key("f13")

    @pytest.mark.skipif(sys.platform == "win32", reason="injection réelle sous Windows")
    def test_win32_driver_unavailable(self):
        with pytest.raises(RuntimeError):
            Win32InputDriver()


class TestPlanner:
    """Tests pour la traduction des coups en glisser-déposer"""

    def test_block_grabbed_at_lowest_card(self):
        planner = Planner(CoordinateConverter())
        state = make_state([[1, 2, 2], [2]], [[]])

        action = planner.plan_move(state, Move(Location.column(0), Location.column(1), 2))

        assert action.start == ScreenPoint(2400, 514)
        assert action.end == ScreenPoint(2528, 514)

    def test_drop_on_empty_column_and_slot(self):
        planner = Planner(CoordinateConverter())
        state = make_state([[1, 2], []], [[]])

        to_column = planner.plan_move(state, Move(Location.column(0), Location.column(1), 1))
        to_slot = planner.plan_move(state, Move(Location.column(0), Location.slot(0), 1))

        assert to_column.end == ScreenPoint(2528, 484)
        assert to_slot.end == ScreenPoint(2400, 310)

    def test_plan_tracks_board(self):
        planner = Planner(CoordinateConverter())
        state = make_state([[0, 0, 0, 1], [1, 1, 1, 0], []], [[]])
        moves = [
            Move(Location.column(0), Location.column(2), 1),
            Move(Location.column(1), Location.column(0), 1),
            Move(Location.column(2), Location.column(1), 1),
        ]

        plan = planner.plan(state, moves)

        assert plan.action_count == 3
        assert [a.index for a in plan.actions] == [0, 1, 2]
        # la 2e dépose se fait sur la colonne 0 réduite à 3 cartes
        assert plan.actions[1].end == CoordinateConverter().card_point(0, 3)
        # la 3e saisie se fait sur la carte posée dans la colonne 2
        assert plan.actions[2].start == CoordinateConverter().card_point(2, 0)
        assert plan.estimated_time > 0

    def test_empty_plan(self):
        plan = Planner().plan(make_state([[1]], [[]]), [])

        assert not plan.has_actions
        assert plan.estimated_time == 0.0


class TestExecutor:
    """Tests pour l'exécuteur"""

    def _plan(self):
        state = make_state([[1, 2], [2], []], [[]])
        moves = [
            Move(Location.column(0), Location.column(1), 1),
            Move(Location.column(0), Location.column(2), 1),
        ]
        return Planner().plan(state, moves)

    def test_execute_records_drags(self):
        driver = RecordingInputDriver()
        result = fast_executor(driver).execute(ExecutorInput(plan=self._plan()))

        assert result.success
        assert result.executed_count == 2
        assert driver.kinds() == ["move", "down", "move", "up"] * 2

    def test_driver_from_input(self):
        driver = RecordingInputDriver()
        result = fast_executor().execute(ExecutorInput(plan=self._plan(), driver=driver))

        assert result.success
        assert len(driver.events) == 8

    def test_no_driver(self):
        result = fast_executor().execute(ExecutorInput(plan=self._plan()))

        assert not result.success
        assert result.executed_count == 0
        assert result.error_count == 1

    def test_stops_after_failure(self):
        driver = FailingDriver()
        result = fast_executor(driver).execute(ExecutorInput(plan=self._plan()))

        assert not result.success
        assert result.executed_count == 0
        assert result.error_count == 1
        assert result.failed_move == self._plan().actions[0].move
        assert driver.kinds() == ["move"]

    def test_failed_drag_leaves_button_released(self):
        driver = StuckMoveDriver()
        result = fast_executor(driver).execute(ExecutorInput(plan=self._plan()))

        assert not result.success
        assert result.executed_count == 0
        assert "curseur bloqué" in result.errors[0]
        assert driver.kinds()[-1] == "up"

    def test_move_delay_override(self):
        driver = RecordingInputDriver()
        executor = fast_executor(driver)
        executor.move_delay = 5.0

        result = executor.execute(ExecutorInput(plan=self._plan(), move_delay=0))

        assert result.success
        assert result.failed_move is None
        assert result.metadata["move_delay"] == 0
        assert result.duration < 5.0


class TestInputReplay:
    """Tests pour l'adaptateur de rejeu"""

    def test_replay_updates_state_and_logs(self, tmp_path):
        driver = RecordingInputDriver()
        logger = DebugLogger(str(tmp_path))
        state = make_state([[3], [3]], [[]])
        actuation = InputReplay(driver, state, executor=fast_executor(driver), logger=logger)

        actuation.replay(Move(Location.column(0), Location.column(1), 1))

        assert actuation.state.columns == ((), (3, 3))
        assert actuation.replayed == 1
        assert driver.kinds() == ["move", "down", "move", "up"]
        assert len(logger.moves) == 1 and logger.moves[0].success

    def test_replay_failure_propagates(self, tmp_path):
        driver = FailingDriver()
        logger = DebugLogger(str(tmp_path))
        state = make_state([[3], [3]], [[]])
        actuation = InputReplay(driver, state, executor=fast_executor(driver), logger=logger)

        with pytest.raises(RuntimeError):
            actuation.replay(Move(Location.column(0), Location.column(1), 1))

        assert actuation.state == state
        assert logger.moves[0].error == "bouton bloqué"

    def test_replay_all(self):
        driver = RecordingInputDriver()
        state = make_state([[0, 0, 0, 1], [1, 1, 1, 0], []], [[]])
        moves = [
            Move(Location.column(0), Location.column(2), 1),
            Move(Location.column(1), Location.column(0), 1),
            Move(Location.column(2), Location.column(1), 1),
        ]
        actuation = InputReplay(driver, state, executor=fast_executor(driver))

        result = actuation.replay_all(moves)

        assert result.success
        assert actuation.replayed == 3
        assert actuation.state.columns == ((0, 0, 0, 0), (1, 1, 1, 1), ())


class TestDebugLogger:
    """Tests pour le logger structuré"""

    def test_move_log_file(self, tmp_path):
        logger = DebugLogger(str(tmp_path))
        logger.log_move(0, "column[0] -> column[1] x1", (1, 2), (3, 4))

        log_file = tmp_path / f"moves_{logger.session_id}.jsonl"
        lines = log_file.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0])["move"] == "column[0] -> column[1] x1"

    def test_save_session(self, tmp_path):
        logger = DebugLogger(str(tmp_path))
        logger.log_move(0, "a", (0, 0), (1, 1))
        logger.log_move(1, "b", (0, 0), (1, 1), success=False, error="x")

        data = json.loads(Path(logger.save_session()).read_text(encoding="utf-8"))

        assert data["summary"]["moves_replayed"] == 1
        assert data["summary"]["moves_failed"] == 1
        assert len(data["moves"]) == 2
