"""Immutable Connect4 board and the pure functions that act on it."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .utils import (
    CONNECT4_COLS,
    CONNECT4_ROWS,
    WINDOW_LENGTH,
    WINDOWS,
    check_n_in_row,
    window_cells,
)

Cell = Tuple[int, int]

_SYMBOLS = {0: ".", 1: "X", -1: "O"}
_TOKENS = {".": 0, "X": 1, "O": -1}


class Side(IntEnum):
    """Board tokens. The human player moves as +1, the AI as -1."""

    PLAYER = 1
    AI = -1

    @property
    def opponent(self) -> "Side":
        return Side(-self.value)


class GameStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


class IllegalMoveError(ValueError):
    """A drop that cannot be applied to the board."""


class ColumnOutOfRangeError(IllegalMoveError):
    pass


class ColumnFullError(IllegalMoveError):
    pass


@dataclass(frozen=True, eq=False)
class Board:
    """
    6x7 grid of cells. Row 0 is the TOP of the board, row 5 the BOTTOM.

    Values: 0 = empty, 1 = player, -1 = AI. The underlying array is a
    read-only copy, so a board never changes after construction; ``drop``
    returns a new board.
    """

    cells: np.ndarray

    def __post_init__(self) -> None:
        cells = np.array(self.cells, dtype=np.int8)
        if cells.shape != (CONNECT4_ROWS, CONNECT4_COLS):
            raise ValueError(
                f"Board must be {CONNECT4_ROWS}x{CONNECT4_COLS}, got shape {cells.shape}"
            )
        if not np.isin(cells, (-1, 0, 1)).all():
            raise ValueError("Board cells must be 0, 1 or -1")
        occupied = cells != 0
        # Pieces rest on the bottom row or on another piece
        floating = occupied[:-1] & ~occupied[1:]
        if floating.any():
            rows, cols = np.nonzero(floating)
            raise ValueError(
                f"Piece at row {int(rows[0])}, column {int(cols[0])} has an empty cell below it"
            )
        cells.setflags(write=False)
        object.__setattr__(self, "cells", cells)

    @classmethod
    def empty(cls) -> "Board":
        return cls(np.zeros((CONNECT4_ROWS, CONNECT4_COLS), dtype=np.int8))

    @classmethod
    def from_strings(cls, rows: Sequence[str]) -> "Board":
        """
        Build a board from text rows, top row first.

        ``.`` is empty, ``X`` the player, ``O`` the AI. Spaces are ignored.
        """
        try:
            parsed = [[_TOKENS[ch] for ch in row.replace(" ", "")] for row in rows]
        except KeyError as exc:
            raise ValueError(f"Unknown board token {exc.args[0]!r}; use ., X or O") from exc
        return cls(np.array(parsed, dtype=np.int8))

    @property
    def rows(self) -> int:
        return self.cells.shape[0]

    @property
    def cols(self) -> int:
        return self.cells.shape[1]

    def move_count(self) -> int:
        return int(np.count_nonzero(self.cells))

    def render(self) -> str:
        """ASCII grid with a column header."""
        header = " " + " ".join(str(c) for c in range(self.cols))
        lines = [
            "|" + "|".join(_SYMBOLS[int(v)] for v in self.cells[r]) + "|"
            for r in range(self.rows)
        ]
        return header + "\n" + "\n".join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.cells, other.cells))

    def __hash__(self) -> int:
        return hash(self.cells.tobytes())

    def __repr__(self) -> str:
        return f"Board(\n{self.render()}\n)"


@dataclass(frozen=True)
class Outcome:
    status: GameStatus
    winner: Optional[Side] = None
    cells: Tuple[Cell, ...] = ()

    @property
    def is_over(self) -> bool:
        return self.status is not GameStatus.IN_PROGRESS


IN_PROGRESS = Outcome(GameStatus.IN_PROGRESS)


def landing_row(board: Board, column: int) -> Optional[int]:
    """Row a piece dropped in ``column`` would occupy, or None if it cannot."""
    if column < 0 or column >= board.cols:
        return None
    for row in range(board.rows - 1, -1, -1):
        if board.cells[row, column] == 0:
            return row
    return None


def try_drop(board: Board, column: int, side: int) -> Optional[Board]:
    """Like :func:`drop` but returns None for an illegal column."""
    row = landing_row(board, column)
    if row is None:
        return None
    cells = board.cells.copy()
    cells[row, column] = side
    return Board(cells)


def drop(board: Board, column: int, side: int) -> Board:
    """
    Place a piece for ``side`` in the lowest empty cell of ``column``.

    Raises:
        ColumnOutOfRangeError: column is not in [0, 6].
        ColumnFullError: the column has no empty cell.
    """
    if column < 0 or column >= board.cols:
        raise ColumnOutOfRangeError(f"Column {column} is out of range")
    new_board = try_drop(board, column, side)
    if new_board is None:
        raise ColumnFullError(f"Column {column} is full")
    return new_board


def available_columns(board: Board) -> List[int]:
    """Columns (left to right) that still have at least one empty cell."""
    top_row = board.cells[0]
    return [col for col in range(board.cols) if top_row[col] == 0]


def is_full(board: Board) -> bool:
    return bool(np.all(board.cells[0] != 0))


def evaluate_outcome(board: Board) -> Outcome:
    """
    Scan every 4-cell window for a win, then check for a draw.

    The whole board is scanned on each call; nothing is cached between moves.
    """
    sums = window_cells(board.cells).sum(axis=1, dtype=np.int16)
    hits = np.flatnonzero(np.abs(sums) == WINDOW_LENGTH)
    if hits.size:
        idx = int(hits[0])
        winner = Side.PLAYER if sums[idx] > 0 else Side.AI
        return Outcome(GameStatus.WIN, winner, WINDOWS[idx])
    if is_full(board):
        return Outcome(GameStatus.DRAW)
    return IN_PROGRESS


def is_winning_drop(board: Board, column: int, side: int) -> bool:
    """True if dropping ``side`` in ``column`` completes four in a row."""
    row = landing_row(board, column)
    if row is None:
        return False
    cells = board.cells.copy()
    cells[row, column] = side
    return check_n_in_row(
        cells, row, column, side, n=WINDOW_LENGTH, rows=board.rows, cols=board.cols
    )


def winning_columns(board: Board, side: int) -> List[int]:
    """Every column where a single drop wins for ``side``."""
    return [col for col in available_columns(board) if is_winning_drop(board, col, side)]
