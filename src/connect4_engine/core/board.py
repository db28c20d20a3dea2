# src/connect4_engine/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Sequence

from connect4_engine.config import ROWS, COLS
from connect4_engine.types import Cell, Token, Move

NO_ROW = -1  # sentinel returned by drop/undo when the column can't be used

_EMPTY_CHARS = {".", "-", "0", " "}
_TOKEN_CHARS = {"X": "X", "x": "X", "O": "O", "o": "O"}


@dataclass(slots=True)
class Board:
    rows: int = ROWS
    cols: int = COLS
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[None for _ in range(self.cols)] for _ in range(self.rows)]

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """
        Build a board from text rows, top row first.
        '.' (or '-', '0', space) is empty, 'X'/'O' are tokens.
        """
        if len(rows) != ROWS:
            raise ValueError(f"Expected {ROWS} rows, got {len(rows)}.")

        grid: List[List[Cell]] = []
        for r, line in enumerate(rows):
            if len(line) != COLS:
                raise ValueError(f"Row {r + 1} must have {COLS} cells, got {len(line)}.")
            row: List[Cell] = []
            for ch in line:
                if ch in _EMPTY_CHARS:
                    row.append(None)
                elif ch in _TOKEN_CHARS:
                    row.append(_TOKEN_CHARS[ch])
                else:
                    raise ValueError(f"Unknown cell character {ch!r} in row {r + 1}.")
            grid.append(row)

        # Gravity: no empty cell may sit below a token
        for c in range(COLS):
            for r in range(ROWS - 1):
                if grid[r][c] is not None and grid[r + 1][c] is None:
                    raise ValueError(f"Floating token in column {c + 1}.")

        return cls(ROWS, COLS, grid)

    def to_rows(self) -> List[str]:
        return ["".join(p if p is not None else "." for p in row) for row in self.grid]

    def __str__(self) -> str:
        return "\n".join(self.to_rows())

    def copy(self) -> "Board":
        b = Board(self.rows, self.cols)
        b.grid = [row[:] for row in self.grid]
        return b

    def legal_moves(self) -> List[Move]:
        return [Move(c) for c in range(self.cols) if self.grid[0][c] is None]

    def is_full(self) -> bool:
        return all(self.grid[0][c] is not None for c in range(self.cols))

    def height(self, col: Move) -> int:
        c = int(col)
        return sum(1 for r in range(self.rows) if self.grid[r][c] is not None)

    def count(self, token: Token) -> int:
        return sum(row.count(token) for row in self.grid)

    def drop(self, col: Move, token: Token) -> int:
        """
        Place a token in the lowest empty row of a column.
        Returns that row, or NO_ROW (board untouched) if the column is full
        or out of range.
        """
        c = int(col)
        if c < 0 or c >= self.cols:
            return NO_ROW

        for r in range(self.rows - 1, -1, -1):
            if self.grid[r][c] is None:
                self.grid[r][c] = token
                return r

        return NO_ROW

    def undo(self, col: Move) -> int:
        """
        Remove the top-most piece from a column.
        Only meant to reverse a previous drop during search.
        """
        c = int(col)
        if c < 0 or c >= self.cols:
            return NO_ROW

        for r in range(self.rows):
            if self.grid[r][c] is not None:
                self.grid[r][c] = None
                return r

        return NO_ROW
