from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import pytest

from connect4_engine.core.board import Board


# X to move; one more X in column 2 completes a vertical four
VERTICAL_THREE = [
    ".......",
    ".......",
    ".......",
    "..X....",
    "..X....",
    "O.X.O.O",
]

# X to move; O threatens a vertical four in column 0
MUST_BLOCK = [
    ".......",
    ".......",
    ".......",
    "O......",
    "O..X...",
    "O..XX..",
]

# Full board with no four-in-a-row for either side
FULL_DRAW = [
    "XXOOXXO",
    "OOXXOOX",
    "XXOOXXO",
    "OOXXOOX",
    "XXOOXXO",
    "OOXXOOX",
]

MIDGAME = [
    ".......",
    ".......",
    "...O...",
    "..XX...",
    "..OXO..",
    ".XOXO..",
]


@pytest.fixture
def vertical_three() -> Board:
    return Board.from_rows(VERTICAL_THREE)


@pytest.fixture
def must_block() -> Board:
    return Board.from_rows(MUST_BLOCK)


@pytest.fixture
def full_draw() -> Board:
    return Board.from_rows(FULL_DRAW)


@pytest.fixture
def midgame() -> Board:
    return Board.from_rows(MIDGAME)


@pytest.fixture
def sample_boards(vertical_three, must_block, midgame) -> list[Board]:
    return [Board(), vertical_three, must_block, midgame]
