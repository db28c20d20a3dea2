from __future__ import annotations

import csv
import random

from connect4_engine.core.rules import is_terminal
from connect4_engine.scripts.benchmark import CSV_COLUMNS, main, random_position, run_benchmark, write_csv


def test_random_position_is_playable():
    board, to_play = random_position(random.Random(7), 8)
    assert board.count("X") + board.count("O") == 8
    assert board.count("X") == board.count("O")
    assert to_play == "X"
    assert not is_terminal(board)


def test_random_position_is_seeded():
    a, _ = random_position(random.Random(3), 6)
    b, _ = random_position(random.Random(3), 6)
    assert a == b


def test_run_benchmark_pairs_pruned_and_full():
    rows = run_benchmark(depths=[1, 2], positions=2, plies=[0, 4], seed=1)
    assert len(rows) == 2 * 2 * 2

    by_key = {(r.position, r.depth, r.pruned): r for r in rows}
    for (pos, depth, pruned), r in by_key.items():
        if not pruned:
            continue
        full = by_key[(pos, depth, False)]
        assert (r.column, r.score) == (full.column, full.score)
        assert r.nodes <= full.nodes

    assert {r.plies for r in rows} == {0, 4}


def test_write_csv(tmp_path):
    rows = run_benchmark(depths=[1], positions=1, plies=[0], compare_full=False)
    out = write_csv(rows, tmp_path / "nested" / "bench.csv")

    with open(out, newline="") as f:
        data = list(csv.reader(f))

    assert data[0] == CSV_COLUMNS
    assert len(data) == 2
    assert data[1][:4] == ["0", "0", "1", "1"]
    assert data[1][4] == "3"


def test_main_writes_timestamped_csv(tmp_path, capsys):
    assert main(["--depths", "1", "--positions", "1", "--outdir", str(tmp_path)]) == 0
    files = list(tmp_path.glob("search_bench_*.csv"))
    assert len(files) == 1
    assert "Wrote 2 rows" in capsys.readouterr().out
