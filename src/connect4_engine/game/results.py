from __future__ import annotations
from typing import Optional, List, Tuple

from connect4_engine.config import CONNECT_N
from connect4_engine.core.board import Board
from connect4_engine.types import Token

Coord = Tuple[int, int]

# right, down, down-right, up-right
_DIRECTIONS = ((0, 1), (1, 0), (1, 1), (-1, 1))


def winner_with_line(board: Board) -> Optional[Tuple[Token, List[Coord]]]:
    """
    Referee check used by the controller, independent of the search's
    has_four(). Returns the winner and the cells of the first line found.
    """
    g = board.grid
    for r in range(board.rows):
        for c in range(board.cols):
            p = g[r][c]
            if p is None:
                continue
            for dr, dc in _DIRECTIONS:
                line = [(r, c)]
                for k in range(1, CONNECT_N):
                    rr, cc = r + dr * k, c + dc * k
                    if not (0 <= rr < board.rows and 0 <= cc < board.cols) or g[rr][cc] != p:
                        break
                    line.append((rr, cc))
                if len(line) == CONNECT_N:
                    return p, line
    return None


def draw(board: Board) -> bool:
    return board.is_full() and winner_with_line(board) is None
