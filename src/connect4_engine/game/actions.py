from __future__ import annotations
from contextlib import contextmanager
from typing import Iterator

from connect4_engine.core.board import Board, NO_ROW
from connect4_engine.errors import IllegalMoveError
from connect4_engine.types import Token, Move


def apply_move(board: Board, move: Move, token: Token) -> int:
    row = board.drop(move, token)
    if row == NO_ROW:
        raise IllegalMoveError(int(move))
    return row


def undo_move(board: Board, move: Move) -> int:
    row = board.undo(move)
    if row == NO_ROW:
        raise IllegalMoveError(int(move), "column is empty")
    return row


@contextmanager
def placed(board: Board, move: Move, token: Token) -> Iterator[int]:
    """
    Drop `token` into `move` for the duration of the block.
    The piece is taken back on every exit path (break, return, exception).
    """
    row = apply_move(board, move, token)
    try:
        yield row
    finally:
        board.undo(move)
