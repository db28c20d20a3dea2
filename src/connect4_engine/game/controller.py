from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Iterable, List, Optional, Tuple

from connect4_engine.ai.base import Agent
from connect4_engine.core.board import Board
from connect4_engine.errors import IllegalMoveError
from connect4_engine.game.actions import apply_move
from connect4_engine.game.results import Coord, draw, winner_with_line
from connect4_engine.game.state import GameState
from connect4_engine.types import Move, Token, other

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveRecord:
    ply: int
    token: Token
    column: int
    row: int
    agent: str = ""
    nodes: int = 0
    depth: int = 0
    time_ms: int = 0
    eval: float | None = None


@dataclass(slots=True)
class MatchResult:
    winner: Optional[Token]
    line: List[Coord] = field(default_factory=list)
    moves: List[MoveRecord] = field(default_factory=list)
    board: Board = field(default_factory=Board)

    @property
    def is_draw(self) -> bool:
        return self.winner is None


def _agent_name(agent: Agent, fallback: str) -> str:
    name = getattr(agent, "name", None)
    if not name:
        return fallback
    return str(name)


def play_move(state: GameState, move: Move, history: List[MoveRecord], agent_name: str = "", info: dict | None = None) -> MoveRecord:
    """
    Apply one move for the side to move, record it and pass the turn.
    Raises IllegalMoveError for a full or out-of-range column.
    """
    c = int(move)
    if c < 0 or c >= state.board.cols:
        raise IllegalMoveError(c, "column out of range")

    row = apply_move(state.board, move, state.current)
    info = info or {}
    rec = MoveRecord(
        ply=len(history) + 1,
        token=state.current,
        column=c,
        row=row,
        agent=agent_name,
        nodes=int(info.get("nodes", 0)),
        depth=int(info.get("depth", 0)),
        time_ms=int(info.get("time_ms", 0)),
        eval=info.get("eval"),
    )
    history.append(rec)
    state.current = other(state.current)
    return rec


def undo_pair(state: GameState, history: List[MoveRecord]) -> int:
    """
    Take back the last two moves (one per side) so the same player is to
    move again. Returns how many moves were undone: 2, or 0 when fewer than
    two moves have been played.
    """
    if len(history) < 2:
        return 0

    for _ in range(2):
        rec = history.pop()
        state.board.undo(Move(rec.column))
        state.current = rec.token

    logger.debug("undo_pair: %d moves left, %s to move", len(history), state.current)
    return 2


def play_match(
    agent_x: Agent,
    agent_o: Agent,
    *,
    first: Token = "X",
    opening: Iterable[int] = (),
) -> MatchResult:
    """
    Play a headless game between two agents.

    `opening` columns are played alternately (starting with `first`)
    before the agents take over. The end of the game is decided by the
    controller's own line check, not by the search evaluator.
    """
    state = GameState(board=Board(), current=first)
    history: List[MoveRecord] = []
    names = {"X": _agent_name(agent_x, "Player X"), "O": _agent_name(agent_o, "Player O")}

    for col in opening:
        play_move(state, Move(int(col)), history, "opening")

    while True:
        w: Optional[Tuple[Token, List[Coord]]] = winner_with_line(state.board)
        if w is not None:
            player, line = w
            logger.info("%s (%s) wins after %d moves", names[player], player, len(history))
            return MatchResult(winner=player, line=line, moves=history, board=state.board)

        if draw(state.board):
            logger.info("Draw after %d moves", len(history))
            return MatchResult(winner=None, moves=history, board=state.board)

        agent = agent_x if state.current == "X" else agent_o
        move = agent.choose_move(state)
        info = getattr(agent, "last_info", None)

        rec = play_move(state, move, history, names[state.current], info)
        logger.debug("ply %d: %s -> column %d (nodes=%d)", rec.ply, rec.token, rec.column + 1, rec.nodes)
