from __future__ import annotations
from math import inf
from typing import Sequence

from connect4_engine.config import CENTER_COL, CENTER_WEIGHT, ROWS, THREE_WEIGHT, TWO_WEIGHT
from connect4_engine.core.board import Board
from connect4_engine.core.rules import WINDOWS, has_four
from connect4_engine.types import Cell, Token, other

# Largest magnitude a non-terminal position can score; always < inf
MAX_HEURISTIC = ROWS * CENTER_WEIGHT + len(WINDOWS) * THREE_WEIGHT


def score_window(cells: Sequence[Cell], token: Token) -> int:
    opp = other(token)
    t_count = sum(1 for v in cells if v == token)
    o_count = sum(1 for v in cells if v == opp)
    e_count = len(cells) - t_count - o_count

    # Complete lines never get here: evaluate() returns +/-inf first.
    if t_count == 3 and e_count == 1:
        return THREE_WEIGHT
    if o_count == 3 and e_count == 1:
        return -THREE_WEIGHT
    if t_count == 2 and e_count == 2:
        return TWO_WEIGHT
    if o_count == 2 and e_count == 2:
        return -TWO_WEIGHT
    return 0


def evaluate(board: Board, token: Token) -> float:
    """
    Static score of a position from `token`'s point of view.

    +inf / -inf for a completed line, otherwise the sum of the center
    column bonus (own pieces only) and every window score.
    """
    if has_four(board, token):
        return inf
    if has_four(board, other(token)):
        return -inf

    g = board.grid
    score = 0

    # center column preference; opponent center pieces are not penalised
    for r in range(board.rows):
        if g[r][CENTER_COL] == token:
            score += CENTER_WEIGHT

    for window in WINDOWS:
        score += score_window([g[r][c] for (r, c) in window], token)

    return float(score)
