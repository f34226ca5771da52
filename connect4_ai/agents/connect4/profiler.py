"""Tracks the human opponent's column choices and looks for exploitable habits."""

from __future__ import annotations

from collections import Counter, deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional, Sequence

from connect4_ai.config.schema import ProfilerConfig
from connect4_ai.games.connect4 import (
    CONNECT4_COLS,
    CONNECT4_ROWS,
    Board,
    available_columns,
    is_winning_drop,
    try_drop,
)

MAX_MOVES = CONNECT4_ROWS * CONNECT4_COLS


@dataclass(frozen=True)
class PatternAnalysis:
    favored_columns: List[int] = field(default_factory=list)
    repeated_sequence: bool = False


class OpponentProfiler:
    """
    Running history of the opponent's moves for one match.

    Moves are only recorded once the difficulty reaches
    ``config.record_min_difficulty``; analysis switches on by difficulty and
    by how much history has been gathered.
    """

    def __init__(self, config: ProfilerConfig, difficulty: int) -> None:
        self.config = config
        self.difficulty = difficulty
        self._moves: Deque[int] = deque(maxlen=MAX_MOVES)

    @property
    def moves(self) -> List[int]:
        return list(self._moves)

    @property
    def enabled(self) -> bool:
        return self.difficulty >= self.config.record_min_difficulty

    def record(self, column: int) -> bool:
        """Append an opponent move; returns False when profiling is off."""
        if not self.enabled:
            return False
        self._moves.append(int(column))
        return True

    def favored_columns(self) -> List[int]:
        """Columns used at least ``favored_threshold`` times, most frequent first."""
        counts = Counter(self._moves)
        favored = [
            col for col, n in counts.items() if n >= self.config.favored_threshold
        ]
        favored.sort(key=lambda col: (-counts[col], col))
        return favored[: self.config.favored_top]

    def has_repeated_sequence(self) -> bool:
        """
        Compare the latest window of moves with the one before it.

        Only the first ``sequence_pairs`` positions are paired up; a pair
        matches when the columns differ by at most ``sequence_tolerance``.
        """
        cfg = self.config
        moves = self.moves
        recent = moves[-cfg.sequence_window:]
        previous = moves[-2 * cfg.sequence_window:-cfg.sequence_window]

        matches = sum(
            1
            for a, b in zip(recent[: cfg.sequence_pairs], previous[: cfg.sequence_pairs])
            if abs(a - b) <= cfg.sequence_tolerance
        )
        return matches >= cfg.sequence_min_matches

    def analyze(self) -> PatternAnalysis:
        cfg = self.config
        count = len(self._moves)

        favored: List[int] = []
        if self.difficulty >= cfg.favored_min_difficulty and count >= cfg.favored_min_moves:
            favored = self.favored_columns()

        repeated = False
        if self.difficulty >= cfg.sequence_min_difficulty and count >= cfg.sequence_min_moves:
            repeated = self.has_repeated_sequence()

        return PatternAnalysis(favored_columns=favored, repeated_sequence=repeated)


def count_winning_followups(board: Board, side: int) -> int:
    return sum(1 for col in available_columns(board) if is_winning_drop(board, col, side))


def find_fork_move(board: Board, side: int, min_wins: int = 2) -> Optional[int]:
    """
    Leftmost column after which ``side`` has at least ``min_wins`` distinct
    winning follow-up columns.
    """
    for col in available_columns(board):
        next_board = try_drop(board, col, side)
        if next_board is None:
            continue
        if count_winning_followups(next_board, side) >= min_wins:
            return col
    return None


def counter_columns(favored: Sequence[int], available: Sequence[int]) -> List[int]:
    """Columns next to or on the favored ones, deduplicated, in favored order."""
    candidates: List[int] = []
    for col in favored:
        for candidate in (col - 1, col, col + 1):
            if candidate in available and candidate not in candidates:
                candidates.append(candidate)
    return candidates
