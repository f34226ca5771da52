"""Shared boards for the test suite."""

from __future__ import annotations

import pytest

from connect4_ai.games.connect4 import Board

# Columns alternate A, B, A, ...; A = X X O O X X and B = O O X X O O top to
# bottom. Full, with no four in a row anywhere.
DRAW_ROWS = [
    "XOXOXOX",
    "XOXOXOX",
    "OXOXOXO",
    "OXOXOXO",
    "XOXOXOX",
    "XOXOXOX",
]

# Dropping O in column 3 leaves two winning follow-ups (columns 2 and 5)
FORK_ROWS = [
    ".......",
    ".......",
    ".......",
    ".......",
    ".O..O.O",
    ".XOXXOX",
]


@pytest.fixture
def empty_board() -> Board:
    return Board.empty()


@pytest.fixture
def draw_board() -> Board:
    return Board.from_strings(DRAW_ROWS)


@pytest.fixture
def fork_board() -> Board:
    return Board.from_strings(FORK_ROWS)


@pytest.fixture
def ai_win_board() -> Board:
    """AI has three on the bottom row; column 3 wins."""
    return Board.from_strings(
        [
            ".......",
            ".......",
            ".......",
            ".......",
            "XX.....",
            "OOO....",
        ]
    )


@pytest.fixture
def forced_block_board() -> Board:
    """Player has three on the bottom row, open on both ends."""
    return Board.from_strings(
        [
            ".......",
            ".......",
            ".......",
            ".......",
            ".......",
            ".XXX...",
        ]
    )
