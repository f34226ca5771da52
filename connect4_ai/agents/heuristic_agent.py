"""Heuristic agent implementation."""

import random
from typing import Optional, Sequence

from connect4_ai.games.connect4 import Board, Side, available_columns, is_winning_drop
from .base_agent import BaseAgent


class HeuristicAgent(BaseAgent):
    """
    Heuristic agent that uses simple rules:
    1. Win if possible
    2. Block opponent from winning
    3. Otherwise random
    """

    def __init__(self, side: Side = Side.PLAYER, seed: Optional[int] = None):
        """
        Initialize heuristic agent.

        Args:
            side: Token the agent plays with
            seed: Random seed for reproducibility
        """
        self.side = Side(side)
        self._rng = random.Random(seed)

    def act(
        self,
        board: Board,
        legal_actions: Optional[Sequence[int]] = None,
    ) -> Optional[int]:
        """Select a column using the heuristic rules."""
        if legal_actions is None:
            legal_actions = available_columns(board)
        if not legal_actions:
            return None

        # Try to win
        for action in legal_actions:
            if is_winning_drop(board, action, self.side):
                return action

        # Try to block opponent
        for action in legal_actions:
            if is_winning_drop(board, action, self.side.opponent):
                return action

        # Otherwise random
        return self._rng.choice(list(legal_actions))
