from __future__ import annotations

from dataclasses import dataclass, field
from math import inf
import logging
import time
from typing import Optional

from connect4_engine.ai.search import SearchResult, best_move
from connect4_engine.config import DEFAULT_DEPTH
from connect4_engine.errors import NoLegalMoveError
from connect4_engine.game.state import GameState
from connect4_engine.types import Move

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MinimaxAgent:
    name: str = "Minimax AI"
    depth: int = DEFAULT_DEPTH
    prune: bool = True

    # Stats from the most recent choose_move
    last_info: dict = field(default_factory=dict)

    def search(self, state: GameState) -> SearchResult:
        return best_move(state.board, self.depth, state.current, prune=self.prune)

    def choose_move(self, state: GameState) -> Move:
        moves = state.board.legal_moves()
        if not moves:
            raise NoLegalMoveError()

        start = time.perf_counter()
        res = self.search(state)
        elapsed = time.perf_counter() - start

        move = res.column
        if move is None:
            # Depth <= 0 or an already decided position: no column from the search
            logger.info("%s: search gave no column, falling back to column %d", self.name, int(moves[0]) + 1)
            move = moves[0]

        self.last_info = {
            "depth": res.depth_reached,
            "nodes": res.nodes_visited,
            "eval": int(res.score) if res.score not in (inf, -inf) else res.score,
            "move_col": int(move) + 1,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        return move

    def hint(self, state: GameState) -> Optional[Move]:
        """
        Best column for whoever is to move in `state`, or None when the
        board has no legal move.
        """
        return self.search(state).column
