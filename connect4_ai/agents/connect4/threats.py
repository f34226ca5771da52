"""Detection and ranking of opponent lines the AI can still block."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from connect4_ai.games.connect4 import (
    CELL_WINDOWS,
    Board,
    Side,
    available_columns,
    landing_row,
    window_cells,
    winning_columns,
)

# Opponent pieces in a still-open window -> severity of blocking it
SEVERITY_BY_COUNT = {3: 100, 2: 50, 1: 10}


@dataclass(frozen=True)
class ThreatRecord:
    column: int
    severity: int


def find_winning_move(board: Board, side: int) -> Optional[int]:
    """Leftmost column that wins immediately for ``side``, if any."""
    columns = winning_columns(board, side)
    return columns[0] if columns else None


def column_threat(board: Board, column: int, side: int = Side.AI) -> int:
    """
    Highest severity blocked by dropping ``side`` into ``column``.

    Only windows through the landing cell that hold no ``side`` piece yet
    count: the drop is what newly blocks them. A window with three opponent
    pieces scores 100, two scores 50, one scores 10.
    """
    row = landing_row(board, column)
    if row is None:
        return 0

    windows = window_cells(board.cells)[CELL_WINDOWS[(row, column)]]
    still_open = windows[~np.any(windows == side, axis=1)]
    if still_open.size == 0:
        return 0

    opp_counts = np.count_nonzero(still_open == -side, axis=1)
    return max(SEVERITY_BY_COUNT.get(int(n), 0) for n in opp_counts)


def rank_threats(board: Board, side: int = Side.AI) -> List[ThreatRecord]:
    """Columns that block something, by descending severity then left to right."""
    records = [
        ThreatRecord(column=col, severity=column_threat(board, col, side))
        for col in available_columns(board)
    ]
    records = [r for r in records if r.severity > 0]
    return sorted(records, key=lambda r: -r.severity)


def top_threat(board: Board, side: int = Side.AI) -> Optional[ThreatRecord]:
    ranked = rank_threats(board, side)
    return ranked[0] if ranked else None
