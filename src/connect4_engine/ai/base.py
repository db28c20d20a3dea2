from __future__ import annotations
from typing import Protocol

from connect4_engine.game.state import GameState
from connect4_engine.types import Move


class Agent(Protocol):
    name: str

    def choose_move(self, state: GameState) -> Move:
        ...
