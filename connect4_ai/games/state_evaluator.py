from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .turn_based_game import TurnBasedGame

S = TypeVar("S")


class StateEvaluator(ABC, Generic[S]):
    """
    Static score of a non-terminal state from the root player's point of view.
    """

    @abstractmethod
    def evaluate(
        self,
        game: TurnBasedGame[S],
        state: S,
        root_player: int,
    ) -> float:
        """
        Return the heuristic score of ``state`` for ``root_player``.
        """
