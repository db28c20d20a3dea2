from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

from connect4_engine.ai.minimax_agent import MinimaxAgent
from connect4_engine.ai.search import best_move
from connect4_engine.config import DEFAULT_DEPTH
from connect4_engine.core.board import Board
from connect4_engine.core.scoring import evaluate
from connect4_engine.errors import Connect4Error
from connect4_engine.game.controller import play_match
from connect4_engine.game.state import GameState
from connect4_engine.log import configure_logging
from connect4_engine.types import Token


def side_to_move(board: Board) -> Token:
    # X always opens, so equal counts means X is to move
    return "X" if board.count("X") <= board.count("O") else "O"


def load_board(args: argparse.Namespace) -> Board:
    if getattr(args, "board_file", None):
        lines = [ln.strip() for ln in Path(args.board_file).read_text().splitlines() if ln.strip()]
        return Board.from_rows(lines)
    if getattr(args, "board", None):
        return Board.from_rows(args.board)
    return Board()


def _fmt_col(col) -> str:
    return "none" if col is None else str(int(col) + 1)


def cmd_move(args: argparse.Namespace) -> int:
    board = load_board(args)
    token: Token = args.token or side_to_move(board)
    res = best_move(board, args.depth, token, prune=not args.no_prune)
    print(f"token={token} column={_fmt_col(res.column)} score={res.score} "
          f"nodes={res.nodes_visited} depth_reached={res.depth_reached}")
    return 0


def cmd_hint(args: argparse.Namespace) -> int:
    board = load_board(args)
    state = GameState(board=board, current=args.token or side_to_move(board))
    col = MinimaxAgent(name="Hint", depth=args.depth).hint(state)
    if col is None:
        print("No legal move.")
    else:
        print(f"Hint for {state.current}: column {int(col) + 1}")
    return 0


def cmd_eval(args: argparse.Namespace) -> int:
    board = load_board(args)
    token: Token = args.token or "X"
    print(f"eval({token}) = {evaluate(board, token)}")
    return 0


def cmd_play(args: argparse.Namespace) -> int:
    ax = MinimaxAgent(name=f"Minimax d{args.depth_x}", depth=args.depth_x)
    ao = MinimaxAgent(name=f"Minimax d{args.depth_o}", depth=args.depth_o)
    result = play_match(ax, ao, first=args.first, opening=args.opening)

    for rec in result.moves:
        print(f"{rec.ply:2d}. {rec.token} -> {rec.column + 1}  "
              f"nodes={rec.nodes} d={rec.depth} eval={rec.eval} {rec.time_ms}ms")
    print()
    print(result.board)
    print()
    if result.winner is None:
        print("Draw game.")
    else:
        print(f"Player {result.winner} wins!")
    return 0


def cmd_bench(args: argparse.Namespace) -> int:
    from connect4_engine.scripts.benchmark import main as bench_main
    return bench_main(args.rest)


def _add_board_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--board", nargs=6, metavar="ROW", help="Six rows top-to-bottom, e.g. ....... (. = empty)")
    p.add_argument("--board-file", type=str, default=None, help="File with six board rows")
    p.add_argument("--token", choices=["X", "O"], default=None, help="Token to search for (default: side to move)")


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="connect4-engine", description="Connect Four alpha-beta engine.")
    ap.add_argument("--log-level", type=str, default=None, help="Logging level (default from CONNECT4_LOG_LEVEL)")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p = sub.add_parser("move", help="Best move for a token")
    _add_board_args(p)
    p.add_argument("--depth", type=int, default=DEFAULT_DEPTH)
    p.add_argument("--no-prune", action="store_true", help="Plain minimax, no alpha-beta cutoffs")
    p.set_defaults(func=cmd_move)

    p = sub.add_parser("hint", help="Suggested move for the side to move")
    _add_board_args(p)
    p.add_argument("--depth", type=int, default=DEFAULT_DEPTH)
    p.set_defaults(func=cmd_hint)

    p = sub.add_parser("eval", help="Static evaluation of a board")
    _add_board_args(p)
    p.set_defaults(func=cmd_eval)

    p = sub.add_parser("play", help="Engine vs engine game")
    p.add_argument("--depth-x", type=int, default=DEFAULT_DEPTH)
    p.add_argument("--depth-o", type=int, default=DEFAULT_DEPTH)
    p.add_argument("--first", choices=["X", "O"], default="X")
    p.add_argument("--opening", type=int, nargs="*", default=[], help="Opening columns (0-based)")
    p.set_defaults(func=cmd_play)

    p = sub.add_parser("bench", help="Search benchmark (see connect4_engine.scripts.benchmark)")
    p.add_argument("rest", nargs=argparse.REMAINDER)
    p.set_defaults(func=cmd_bench)

    return ap


def main(argv: List[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    configure_logging(args.log_level)
    try:
        return args.func(args)
    except (Connect4Error, ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
