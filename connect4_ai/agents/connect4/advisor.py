"""Deterministic best-move lookup and coaching hints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from connect4_ai.config.schema import EngineConfig
from connect4_ai.games.connect4 import Board, Side, available_columns
from .policy import best_scored, score_columns
from .threats import find_winning_move

# Center first, then outwards
CENTER_ORDER = (3, 2, 4, 1, 5, 0, 6)


@dataclass(frozen=True)
class Hint:
    column: int
    reason: str


def center_column(board: Board) -> Optional[int]:
    available = available_columns(board)
    for col in CENTER_ORDER:
        if col in available:
            return col
    return None


def best_move(board: Board, side: Side = Side.AI) -> Optional[int]:
    """
    Win, else block, else the best static evaluation, else the most central
    open column. No random gates; returns None on a full board.
    """
    available = available_columns(board)
    if not available:
        return None

    column = find_winning_move(board, side)
    if column is not None:
        return column

    column = find_winning_move(board, side.opponent)
    if column is not None:
        return column

    column, score = best_scored(score_columns(board, available, side))
    if column is not None and score >= 0:
        return column

    return center_column(board)


def coaching_hint(
    board: Board,
    side: Side = Side.PLAYER,
    config: Optional[EngineConfig] = None,
) -> Optional[Hint]:
    """Suggest a column for ``side`` (the human by default) with a short explanation."""
    config = config or EngineConfig()
    available = available_columns(board)
    if not available:
        return None

    column = find_winning_move(board, side)
    if column is not None:
        return Hint(column, f"You can win right now by playing column {column}.")

    column = find_winning_move(board, side.opponent)
    if column is not None:
        return Hint(
            column,
            f"Block column {column}: your opponent connects four there on the next move.",
        )

    column, score = best_scored(score_columns(board, available, side))
    if column is not None and score > config.hints.min_score:
        return Hint(
            column,
            f"Column {column} builds the most open lines for you (position score {score}).",
        )

    column = center_column(board)
    if column is None:
        return None
    return Hint(column, f"Stay central: column {column} keeps the most winning lines open.")
