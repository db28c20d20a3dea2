from __future__ import annotations

import argparse
import csv
import logging
import random
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Sequence

from connect4_engine.ai.search import best_move
from connect4_engine.core.board import Board
from connect4_engine.core.rules import is_terminal
from connect4_engine.log import configure_logging
from connect4_engine.types import Token, other

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "position", "plies", "depth", "pruned",
    "column", "score", "nodes", "depth_reached", "time_ms",
]


@dataclass(frozen=True)
class BenchRow:
    position: int
    plies: int
    depth: int
    pruned: bool
    column: int | None
    score: float
    nodes: int
    depth_reached: int
    time_ms: float

    def as_list(self) -> list:
        return [
            self.position, self.plies, self.depth, int(self.pruned),
            "" if self.column is None else self.column,
            self.score, self.nodes, self.depth_reached, round(self.time_ms, 3),
        ]


def random_position(rng: random.Random, plies: int) -> tuple[Board, Token]:
    """
    Play `plies` random legal moves from the empty board, never stepping
    into a finished game. Returns the board and the side to move.
    """
    board = Board()
    to_play: Token = "X"
    for _ in range(plies):
        moves = board.legal_moves()
        rng.shuffle(moves)
        for m in moves:
            board.drop(m, to_play)
            if not is_terminal(board):
                break
            board.undo(m)
        else:
            break
        to_play = other(to_play)
    return board, to_play


def run_benchmark(
    depths: Sequence[int],
    positions: int = 5,
    plies: Iterable[int] = (0, 4, 8),
    seed: int = 1234,
    compare_full: bool = True,
) -> List[BenchRow]:
    rng = random.Random(seed)
    plies = list(plies)
    rows: List[BenchRow] = []

    for idx in range(positions):
        n = plies[idx % len(plies)]
        board, to_play = random_position(rng, n)

        for d in depths:
            modes = (True, False) if compare_full else (True,)
            for pruned in modes:
                start = time.perf_counter()
                res = best_move(board, d, to_play, prune=pruned)
                ms = (time.perf_counter() - start) * 1000

                rows.append(BenchRow(
                    position=idx,
                    plies=board.count("X") + board.count("O"),
                    depth=d,
                    pruned=pruned,
                    column=None if res.column is None else int(res.column),
                    score=res.score,
                    nodes=res.nodes_visited,
                    depth_reached=res.depth_reached,
                    time_ms=ms,
                ))
                logger.info(
                    "pos=%d depth=%d pruned=%s nodes=%d col=%s %.1fms",
                    idx, d, pruned, res.nodes_visited, res.column, ms,
                )

    return rows


def write_csv(rows: Iterable[BenchRow], out_path: Path) -> Path:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(CSV_COLUMNS)
        for r in rows:
            w.writerow(r.as_list())
    return out_path


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Benchmark the alpha-beta search on random positions.")
    ap.add_argument("--depths", type=int, nargs="+", default=[1, 2, 3, 4], help="Search depths to run")
    ap.add_argument("--positions", type=int, default=5, help="Number of random positions")
    ap.add_argument("--plies", type=int, nargs="+", default=[0, 4, 8], help="Opening lengths, cycled per position")
    ap.add_argument("--seed", type=int, default=1234, help="RNG seed for the openings")
    ap.add_argument("--no-full", action="store_true", help="Skip the unpruned minimax comparison")
    ap.add_argument("--outdir", type=str, default="data/results", help="Directory for the CSV")
    ap.add_argument("--log-level", type=str, default=None, help="Logging level (default from CONNECT4_LOG_LEVEL)")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    configure_logging(args.log_level)

    rows = run_benchmark(
        depths=args.depths,
        positions=args.positions,
        plies=args.plies,
        seed=args.seed,
        compare_full=not args.no_full,
    )

    ts = time.strftime("%Y%m%d_%H%M%S")
    out_path = write_csv(rows, Path(args.outdir) / f"search_bench_{ts}.csv")
    print(f"Wrote {len(rows)} rows to {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
