from __future__ import annotations

from dataclasses import dataclass
from math import inf
import logging
import time
from typing import List, Optional, Tuple

from connect4_engine.config import CENTER_COL
from connect4_engine.core.board import Board
from connect4_engine.core.rules import is_terminal
from connect4_engine.core.scoring import evaluate
from connect4_engine.game.actions import placed
from connect4_engine.types import Move, Token, other

logger = logging.getLogger(__name__)

NodeValue = Tuple[float, Optional[Move]]


@dataclass(frozen=True, slots=True)
class SearchResult:
    column: Optional[Move]
    score: float
    nodes_visited: int
    depth_reached: int


def ordered_moves(board: Board) -> List[Move]:
    """
    Legal moves, center column first.
    sorted() is stable, so equal distances keep left-to-right order.
    """
    return sorted(board.legal_moves(), key=lambda m: abs(int(m) - CENTER_COL))


@dataclass(slots=True)
class AlphaBetaSearch:
    """
    Depth-limited minimax from one token's point of view.

    `run` searches the given board in place: every drop is undone before
    the call returns, so the board comes back unchanged. With prune=False
    the same tree is searched without alpha-beta cutoffs.
    """
    prune: bool = True

    _nodes: int = 0
    _max_ply: int = 0
    _root_depth: int = 0
    _cutoffs: int = 0

    @property
    def cutoffs(self) -> int:
        return self._cutoffs

    def run(self, board: Board, depth: int, token: Token) -> SearchResult:
        self._nodes = 0
        self._max_ply = 0
        self._cutoffs = 0
        self._root_depth = depth

        score, column = self._max_value(board, depth, -inf, inf, token)
        return SearchResult(
            column=column,
            score=score,
            nodes_visited=self._nodes,
            depth_reached=self._max_ply,
        )

    def _enter(self, depth: int) -> None:
        self._nodes += 1
        ply = self._root_depth - depth
        if ply > self._max_ply:
            self._max_ply = ply

    def _max_value(self, board: Board, depth: int, alpha: float, beta: float, me: Token) -> NodeValue:
        self._enter(depth)

        if depth <= 0 or is_terminal(board):
            return evaluate(board, me), None

        moves = ordered_moves(board)
        value = -inf
        best = moves[0]

        for m in moves:
            with placed(board, m, me):
                score, _ = self._min_value(board, depth - 1, alpha, beta, me)

            if score > value:
                value, best = score, m

            if self.prune:
                alpha = max(alpha, value)
                if alpha >= beta:
                    self._cutoffs += 1
                    break

        return value, best

    def _min_value(self, board: Board, depth: int, alpha: float, beta: float, me: Token) -> NodeValue:
        self._enter(depth)

        if depth <= 0 or is_terminal(board):
            return evaluate(board, me), None

        moves = ordered_moves(board)
        opp = other(me)
        value = inf
        best = moves[0]

        for m in moves:
            with placed(board, m, opp):
                score, _ = self._max_value(board, depth - 1, alpha, beta, me)

            if score < value:
                value, best = score, m

            if self.prune:
                beta = min(beta, value)
                if alpha >= beta:
                    self._cutoffs += 1
                    break

        return value, best


def best_move(board: Board, depth: int, token: Token, *, prune: bool = True) -> SearchResult:
    """
    Pick the best column for `token`, searching `depth` plies ahead.

    The caller's board is never touched; the search runs on a copy.
    A board with no legal moves yields column=None and score 0. A depth
    of 0 or less returns the static evaluation with no column.
    """
    b = board.copy()
    if not b.legal_moves():
        return SearchResult(column=None, score=0.0, nodes_visited=0, depth_reached=0)

    search = AlphaBetaSearch(prune=prune)
    start = time.perf_counter()
    result = search.run(b, depth, token)
    elapsed_ms = (time.perf_counter() - start) * 1000

    logger.debug(
        "best_move token=%s depth=%d prune=%s -> col=%s score=%s nodes=%d reached=%d cut=%d %.1fms",
        token, depth, prune, result.column, result.score,
        result.nodes_visited, result.depth_reached, search.cutoffs, elapsed_ms,
    )
    return result
