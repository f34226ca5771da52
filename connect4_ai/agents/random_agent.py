"""Random agent implementation."""

import random
from typing import Optional, Sequence

from connect4_ai.games.connect4 import Board, Side, available_columns
from .base_agent import BaseAgent


class RandomAgent(BaseAgent):
    """Agent that selects columns uniformly from the legal ones."""

    def __init__(self, side: Side = Side.PLAYER, seed: Optional[int] = None):
        """
        Initialize random agent.

        Args:
            side: Token the agent plays with
            seed: Random seed for reproducibility (uses local RNG, not global)
        """
        self.side = Side(side)
        self._rng = random.Random(seed)

    def act(
        self,
        board: Board,
        legal_actions: Optional[Sequence[int]] = None,
    ) -> Optional[int]:
        """
        Select a random legal column.

        Args:
            board: Current board
            legal_actions: Optional precomputed legal columns

        Returns:
            Randomly selected column, or None if the board is full
        """
        if legal_actions is None:
            legal_actions = available_columns(board)
        if not legal_actions:
            return None
        return self._rng.choice(list(legal_actions))
