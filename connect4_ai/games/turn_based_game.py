from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Sequence, TypeVar, Optional

S = TypeVar("S")  # state type
Action = int  # actions are column indices


class TurnBasedGame(ABC, Generic[S]):
    """
    Common interface for a deterministic two-player perfect-information game.
    Pure rules only: no environment, no I/O.
    """

    @abstractmethod
    def legal_actions(self, state: S) -> Sequence[Action]:
        """All legal actions in the given state, in a stable order."""

    @abstractmethod
    def apply_action(self, state: S, action: Action) -> S:
        """Return a new state after the move; ``state`` is left untouched."""

    @abstractmethod
    def current_player(self, state: S) -> int:
        """
        Token of the side to move:
        1 for the human player, -1 for the AI.
        """

    @abstractmethod
    def is_terminal(self, state: S) -> bool:
        """Is the state final (win or draw)?"""

    @abstractmethod
    def winner(self, state: S) -> Optional[int]:
        """
        Who won:

        * 1: the side with token +1
        * -1: the side with token -1
        * 0: draw
        * None: not finished yet
        """
