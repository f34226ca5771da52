"""Shared utilities for Connect4 game logic."""

from __future__ import annotations

from typing import Dict, List, Tuple

import numpy as np

# Default board dimensions
CONNECT4_ROWS = 6
CONNECT4_COLS = 7
WINDOW_LENGTH = 4


def _build_windows(rows: int, cols: int, n: int) -> List[Tuple[Tuple[int, int], ...]]:
    """
    Enumerate every line of ``n`` cells on the board.

    Order: horizontal, vertical, diagonal down-right, diagonal down-left.
    Row 0 is the top of the board.
    """
    windows: List[Tuple[Tuple[int, int], ...]] = []

    for r in range(rows):
        for c in range(cols - n + 1):
            windows.append(tuple((r, c + i) for i in range(n)))

    for r in range(rows - n + 1):
        for c in range(cols):
            windows.append(tuple((r + i, c) for i in range(n)))

    for r in range(rows - n + 1):
        for c in range(cols - n + 1):
            windows.append(tuple((r + i, c + i) for i in range(n)))

    for r in range(rows - n + 1):
        for c in range(n - 1, cols):
            windows.append(tuple((r + i, c - i) for i in range(n)))

    return windows


WINDOWS = _build_windows(CONNECT4_ROWS, CONNECT4_COLS, WINDOW_LENGTH)

# Fancy-index arrays: board[WINDOW_ROWS, WINDOW_COLS] has shape (69, 4)
WINDOW_ROWS = np.array([[r for r, _ in w] for w in WINDOWS], dtype=np.intp)
WINDOW_COLS = np.array([[c for _, c in w] for w in WINDOWS], dtype=np.intp)


def _build_cell_index(windows) -> Dict[Tuple[int, int], np.ndarray]:
    index: Dict[Tuple[int, int], List[int]] = {}
    for w_idx, window in enumerate(windows):
        for cell in window:
            index.setdefault(cell, []).append(w_idx)
    return {cell: np.array(ids, dtype=np.intp) for cell, ids in index.items()}


# (row, col) -> indices of every window passing through that cell
CELL_WINDOWS = _build_cell_index(WINDOWS)


def window_cells(cells: np.ndarray) -> np.ndarray:
    """Gather all windows of a (6, 7) cell array into a (69, 4) array."""
    return cells[WINDOW_ROWS, WINDOW_COLS]


def check_n_in_row(
    board: np.ndarray,
    row: int,
    col: int,
    player: int,
    n: int,
    rows: int,
    cols: int,
) -> bool:
    """
    Check if there are at least n pieces in a row for the given player
    passing through (row, col).

    Args:
        board: Game board array.
        row: Row position to check from.
        col: Column position to check from.
        player: Player token (1 or -1).
        n: Number of pieces in a row to check for.
        rows: Total number of rows.
        cols: Total number of columns.

    Returns:
        True if player has at least n in a row through (row, col).
    """
    directions = [(0, 1), (1, 0), (1, 1), (1, -1)]

    for dr, dc in directions:
        count = 1
        # Check positive direction
        for i in range(1, n):
            r, c = row + dr * i, col + dc * i
            if 0 <= r < rows and 0 <= c < cols and board[r, c] == player:
                count += 1
            else:
                break
        # Check negative direction
        for i in range(1, n):
            r, c = row - dr * i, col - dc * i
            if 0 <= r < rows and 0 <= c < cols and board[r, c] == player:
                count += 1
            else:
                break

        if count >= n:
            return True

    return False
