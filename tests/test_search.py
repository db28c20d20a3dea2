from __future__ import annotations

from math import inf, isfinite

import pytest

from connect4_engine import best_move
from connect4_engine.ai.search import AlphaBetaSearch, SearchResult, ordered_moves
from connect4_engine.core.board import Board
from connect4_engine.core.scoring import evaluate


def test_ordered_moves_center_first():
    assert ordered_moves(Board()) == [3, 2, 4, 1, 5, 0, 6]


def test_ordered_moves_skips_full_columns(full_draw):
    assert ordered_moves(full_draw) == []
    b = Board()
    for i in range(6):
        b.drop(3, "X" if i % 2 == 0 else "O")
    assert ordered_moves(b) == [2, 4, 1, 5, 0, 6]


def test_no_legal_moves(full_draw):
    assert best_move(full_draw, 4, "X") == SearchResult(column=None, score=0.0, nodes_visited=0, depth_reached=0)


def test_depth_one_on_empty_board():
    res = best_move(Board(), 1, "X")
    assert res.column == 3
    assert res.score == 3.0
    # root + 7 replies
    assert res.nodes_visited == 8
    assert res.depth_reached == 1


@pytest.mark.parametrize("depth", [0, -2])
def test_non_positive_depth_is_static_eval(midgame, depth):
    res = best_move(midgame, depth, "X")
    assert res.column is None
    assert res.score == evaluate(midgame, "X")
    assert res.nodes_visited == 1
    assert res.depth_reached == 0


@pytest.mark.parametrize("depth", [1, 2, 3])
def test_takes_immediate_vertical_win(vertical_three, depth):
    res = best_move(vertical_three, depth, "X")
    assert res.column == 2
    assert res.score == inf


@pytest.mark.parametrize("depth", [2, 3])
def test_blocks_opponent_vertical_threat(must_block, depth):
    res = best_move(must_block, depth, "X")
    assert res.column == 0
    assert isfinite(res.score)


def test_every_move_loses_reports_first_ordered_column():
    # O has two separate immediate wins; X can only block one
    b = Board.from_rows([
        ".......",
        ".......",
        ".......",
        "O.....O",
        "O.....O",
        "OX...XO",
    ])
    res = best_move(b, 2, "X")
    assert res.score == -inf
    assert res.column == 3


def test_best_move_leaves_input_untouched(sample_boards):
    for board in sample_boards:
        before = board.to_rows()
        for token in ("X", "O"):
            best_move(board, 3, token)
        assert board.to_rows() == before


def test_in_place_search_restores_board(sample_boards):
    for board in sample_boards:
        before = board.to_rows()
        for prune in (True, False):
            AlphaBetaSearch(prune=prune).run(board, 3, "O")
            assert board.to_rows() == before


def test_deterministic(midgame):
    first = best_move(midgame, 4, "O")
    for _ in range(3):
        assert best_move(midgame, 4, "O") == first


@pytest.mark.parametrize("depth", [1, 2, 3, 4])
def test_pruning_never_changes_the_decision(sample_boards, depth):
    for board in sample_boards:
        for token in ("X", "O"):
            pruned = best_move(board, depth, token)
            full = best_move(board, depth, token, prune=False)
            assert (pruned.column, pruned.score) == (full.column, full.score)
            assert pruned.nodes_visited <= full.nodes_visited


def test_empty_board_depth_four():
    pruned = best_move(Board(), 4, "X")
    full = best_move(Board(), 4, "X", prune=False)

    assert pruned.column in (2, 3, 4)
    assert isfinite(pruned.score)
    assert pruned.depth_reached == 4

    # 1 + 7 + 49 + 343 + 2401
    assert full.nodes_visited == 2801
    assert full.depth_reached == 4
    assert pruned.nodes_visited < full.nodes_visited


def test_terminal_root_has_no_column():
    b = Board.from_rows(["......."] * 4 + ["OOO....", "XXXX..."])
    res = best_move(b, 3, "X")
    assert res.column is None
    assert res.score == inf
    assert res.nodes_visited == 1


def test_depth_reached_stops_when_board_fills(full_draw):
    full_draw.undo(6)
    res = best_move(full_draw, 5, "X")
    # one legal move, and it fills the board
    assert res.column == 6
    assert res.nodes_visited == 2
    assert res.depth_reached == 1
    assert isfinite(res.score)
