from __future__ import annotations
from dataclasses import dataclass

from connect4_engine.core.board import Board
from connect4_engine.types import Token


@dataclass(slots=True)
class GameState:
    board: Board
    current: Token = "X"
