"""Connect4 board model and game rules."""

from __future__ import annotations

from .board import (
    Board,
    Cell,
    ColumnFullError,
    ColumnOutOfRangeError,
    GameStatus,
    IllegalMoveError,
    Outcome,
    Side,
    available_columns,
    drop,
    evaluate_outcome,
    is_full,
    is_winning_drop,
    landing_row,
    try_drop,
    winning_columns,
)
from .game import Connect4Game
from .state import Connect4State
from .utils import (
    CELL_WINDOWS,
    CONNECT4_COLS,
    CONNECT4_ROWS,
    WINDOWS,
    check_n_in_row,
    window_cells,
)

__all__ = [
    "Board",
    "Cell",
    "CELL_WINDOWS",
    "CONNECT4_COLS",
    "CONNECT4_ROWS",
    "ColumnFullError",
    "ColumnOutOfRangeError",
    "Connect4Game",
    "Connect4State",
    "GameStatus",
    "IllegalMoveError",
    "Outcome",
    "Side",
    "WINDOWS",
    "available_columns",
    "check_n_in_row",
    "drop",
    "evaluate_outcome",
    "is_full",
    "is_winning_drop",
    "landing_row",
    "try_drop",
    "window_cells",
    "winning_columns",
]
