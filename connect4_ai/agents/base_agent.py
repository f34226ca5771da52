"""Base agent interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from connect4_ai.games.connect4 import Board, Side


class BaseAgent(ABC):
    """Base class for everything that picks a column."""

    side: Side = Side.PLAYER

    @abstractmethod
    def act(
        self,
        board: Board,
        legal_actions: Optional[Sequence[int]] = None,
    ) -> Optional[int]:
        """Return a column for ``board``, or None when no column is legal."""

    def observe_opponent_move(self, column: int) -> None:
        """Called with each column the other side plays."""
