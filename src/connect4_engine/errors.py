from __future__ import annotations


class Connect4Error(Exception):
    """Base class for controller and agent errors."""


class IllegalMoveError(Connect4Error):
    def __init__(self, column: int, reason: str = "column is full") -> None:
        super().__init__(f"Illegal move in column {column + 1}: {reason}.")
        self.column = column


class NoLegalMoveError(Connect4Error):
    def __init__(self) -> None:
        super().__init__("No legal moves.")
