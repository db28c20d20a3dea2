from __future__ import annotations

from math import inf, isfinite

import pytest

from connect4_engine.core.board import Board
from connect4_engine.core.scoring import MAX_HEURISTIC, evaluate, score_window


def _bottom(row: str) -> Board:
    return Board.from_rows(["......."] * 5 + [row])


def test_empty_board_scores_zero():
    assert evaluate(Board(), "X") == 0.0
    assert evaluate(Board(), "O") == 0.0


def test_center_bonus_only_for_own_pieces():
    b = _bottom("...X...")
    assert evaluate(b, "X") == 3.0
    # no matching penalty for the opponent's center piece
    assert evaluate(b, "O") == 0.0


def test_two_in_open_windows():
    # three horizontal windows hold both X pieces with two blanks
    b = _bottom("..XX...")
    assert evaluate(b, "X") == 3 + 3 * 15
    assert evaluate(b, "O") == -3 * 15


def test_three_with_one_gap():
    b = _bottom("XXX....")
    # XXX. = 120, XX.. = 15, X... = 0
    assert evaluate(b, "X") == 135.0
    assert evaluate(b, "O") == -135.0


@pytest.mark.parametrize(
    "cells, expected",
    [
        (["X", "X", "X", None], 120),
        (["O", "O", None, "O"], -120),
        ([None, "X", "X", None], 15),
        (["O", None, None, "O"], -15),
        (["X", "O", None, None], 0),
        (["X", "X", "X", "O"], 0),
        (["X", None, None, None], 0),
        ([None, None, None, None], 0),
    ],
)
def test_score_window(cells, expected):
    assert score_window(cells, "X") == expected


def test_completed_line_is_infinite():
    b = Board.from_rows(["......."] * 4 + ["OOO....", "XXXX..."])
    assert evaluate(b, "X") == inf
    assert evaluate(b, "O") == -inf


def test_heuristic_stays_below_win_sentinel(midgame):
    assert MAX_HEURISTIC < inf
    for token in ("X", "O"):
        s = evaluate(midgame, token)
        assert isfinite(s)
        assert abs(s) <= MAX_HEURISTIC


def test_evaluate_does_not_mutate(midgame):
    before = midgame.to_rows()
    evaluate(midgame, "X")
    assert midgame.to_rows() == before
