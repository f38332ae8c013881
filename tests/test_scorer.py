"""
Tests unitaires pour le score et le seuil de victoire
"""

import pytest

from tableau_bot.lib.s3_state import GameState
from tableau_bot.lib.s4_solver import is_solved, score, win_threshold, win_threshold_for


def make_state(columns, slots) -> GameState:
    return GameState.from_piles(columns, slots=slots)


class TestScore:
    """Tests pour la fonction de score"""

    def test_empty_board(self):
        state = make_state([[]] * 8, [[]] * 4)

        assert score(state) == 12

    @pytest.mark.parametrize("column, contribution", [
        ([], 1),
        ([9], 2),
        ([1, 2, 2], 4),
        ([3, 3, 3], 8),
        ([0, 5, 5, 5, 5], 16),
        ([5, 5, 5, 5], 16),
    ])
    def test_column_contribution(self, column, contribution):
        assert score(make_state([column], [])) == contribution

    @pytest.mark.parametrize("slot, contribution", [
        ([], 1),
        ([7], 2),
        ([7, 7, 7, 7], 16),
    ])
    def test_slot_contribution(self, slot, contribution):
        assert score(make_state([], [slot])) == contribution


class TestWinThreshold:
    """Tests pour le seuil de victoire dérivé de la forme du plateau"""

    @pytest.mark.parametrize("slots, expected", [(4, 162), (3, 161), (2, 160), (1, 144)])
    def test_standard_board(self, slots, expected):
        assert win_threshold(8, slots, 40) == expected

    def test_solved_board_reaches_threshold(self):
        columns = [[value] * 4 for value in range(8)]
        slots = [[8] * 4, [9] * 4, [], []]
        state = make_state(columns, slots)

        assert score(state) == win_threshold_for(state) == 162

    def test_solved_board_with_stacked_runs(self):
        # une seule case : la dixième suite repose sous une autre
        columns = [[value] * 4 for value in range(7)] + [[7] * 4 + [8] * 4]
        state = make_state(columns, [[9] * 4])

        assert score(state) == win_threshold_for(state) == 144

    def test_unsolved_board_below_threshold(self):
        state = GameState.from_piles(
            [[c % 10 for c in range(i * 5, i * 5 + 5)] for i in range(8)], difficulty=2
        )

        assert state.card_count == 40
        assert score(state) < win_threshold_for(state)


class TestIsSolved:
    """Tests pour la vérification d'un plateau rangé"""

    def test_runs_and_stacked_runs(self):
        assert is_solved(make_state([[1] * 4, [2] * 4 + [3] * 4, []], [[4] * 4, []]))

    def test_buried_card_under_full_run(self):
        state = make_state([[9, 0, 0, 0, 0], [1] * 4], [[]])

        assert not is_solved(state)

    def test_incomplete_run(self):
        assert not is_solved(make_state([[1, 1, 1]], [[]]))
        assert not is_solved(make_state([[]], [[2]]))

    def test_threshold_reached_on_unsolved_board(self):
        # une case : neuf suites au sommet atteignent le seuil, la dixième face reste enterrée
        state = GameState.from_piles(
            [[9, 0, 0, 0, 0], [9, 1, 1, 1, 1], [9, 2, 2, 2, 2], [9, 3, 3, 3, 3],
             [4] * 4, [5] * 4, [6] * 4, [7] * 4],
            difficulty=3,
            slots=[[8] * 4],
        )

        assert score(state) == win_threshold_for(state) == 144
        assert not is_solved(state)
