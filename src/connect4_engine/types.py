# src/connect4_engine/types.py

from __future__ import annotations
from typing import Literal, Optional, NewType

Token = Literal["X", "O"]
Cell = Optional[Token]
Move = NewType("Move", int)   # column index 0..6


def other(token: Token) -> Token:
    return "O" if token == "X" else "X"
