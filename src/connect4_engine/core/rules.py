from __future__ import annotations
from typing import List, Tuple

from connect4_engine.config import ROWS, COLS, CONNECT_N
from connect4_engine.types import Token
from connect4_engine.core.board import Board

Coord = Tuple[int, int]  # (row, col)
Window = Tuple[Coord, ...]


def _build_windows() -> Tuple[Window, ...]:
    n = CONNECT_N
    out: List[Window] = []

    # Horizontal
    for r in range(ROWS):
        for c in range(COLS - n + 1):
            out.append(tuple((r, c + i) for i in range(n)))

    # Vertical
    for c in range(COLS):
        for r in range(ROWS - n + 1):
            out.append(tuple((r + i, c) for i in range(n)))

    # Diagonal down-right
    for r in range(ROWS - n + 1):
        for c in range(COLS - n + 1):
            out.append(tuple((r + i, c + i) for i in range(n)))

    # Diagonal up-right
    for r in range(n - 1, ROWS):
        for c in range(COLS - n + 1):
            out.append(tuple((r - i, c + i) for i in range(n)))

    return tuple(out)


# Every 4-cell line on the board (69 on 6x7)
WINDOWS: Tuple[Window, ...] = _build_windows()


def has_four(board: Board, token: Token) -> bool:
    g = board.grid
    for window in WINDOWS:
        if all(g[r][c] == token for (r, c) in window):
            return True
    return False


def is_terminal(board: Board) -> bool:
    return has_four(board, "X") or has_four(board, "O") or board.is_full()
