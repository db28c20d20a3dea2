from __future__ import annotations

from connect4_engine.main import main, side_to_move
from connect4_engine.core.board import Board

VERTICAL_THREE = ["......."] * 3 + ["..X....", "..X....", "O.X.O.O"]
MUST_BLOCK = ["......."] * 3 + ["O......", "O..X...", "O..XX.."]


def test_side_to_move():
    assert side_to_move(Board()) == "X"
    b = Board()
    b.drop(3, "X")
    assert side_to_move(b) == "O"


def test_move_command(capsys):
    assert main(["move", "--board", *VERTICAL_THREE, "--depth", "2", "--token", "X"]) == 0
    out = capsys.readouterr().out
    assert "column=3" in out
    assert "score=inf" in out


def test_hint_command(capsys):
    assert main(["hint", "--board", *MUST_BLOCK, "--depth", "2"]) == 0
    assert "Hint for X: column 1" in capsys.readouterr().out


def test_eval_command_from_file(tmp_path, capsys):
    path = tmp_path / "board.txt"
    path.write_text("\n".join(["......."] * 5 + ["...X..."]) + "\n")
    assert main(["eval", "--board-file", str(path), "--token", "X"]) == 0
    assert "eval(X) = 3.0" in capsys.readouterr().out


def test_play_command(capsys):
    assert main(["play", "--depth-x", "2", "--depth-o", "1"]) == 0
    out = capsys.readouterr().out
    assert "wins!" in out or "Draw game." in out


def test_bad_board_exits_with_error(capsys):
    rows = ["......."] * 5 + ["..Z...."]
    assert main(["move", "--board", *rows]) == 2
    assert "error:" in capsys.readouterr().err
