"""Fixed-depth minimax search policy with alpha-beta pruning."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, List, Optional, Sequence, TypeVar

import math

from connect4_ai.games.state_evaluator import StateEvaluator
from connect4_ai.games.turn_based_game import Action, TurnBasedGame
from .action_policy import ActionPolicy

StateT = TypeVar("StateT")

WIN_SCORE = 100000


@dataclass
class MinimaxConfig:
    depth: int = 3
    use_alpha_beta: bool = True
    win_score: int = WIN_SCORE

    def __post_init__(self) -> None:
        if self.depth <= 0:
            raise ValueError("Minimax depth must be >= 1")


@dataclass(frozen=True)
class SearchResult:
    score: int
    column: Optional[Action]


class MinimaxPolicy(ActionPolicy[StateT], Generic[StateT]):
    """
    Classic max/min search over TurnBasedGame + StateEvaluator.

    The side to move at the root is always the maximizing player and every
    leaf is scored from its perspective. Children are expanded in the order
    ``game.legal_actions`` returns them; on equal scores the first child wins.
    """

    def __init__(
        self,
        evaluator: StateEvaluator[StateT],
        config: Optional[MinimaxConfig] = None,
    ) -> None:
        self.evaluator = evaluator
        self.config = config or MinimaxConfig()
        self.nodes = 0

    def search(self, game: TurnBasedGame[StateT], state: StateT) -> SearchResult:
        """Run the search from ``state`` and return the root score and column."""
        self.nodes = 0
        root_player = game.current_player(state)
        return self._minimax(
            game=game,
            state=state,
            depth=self.config.depth,
            alpha=-math.inf,
            beta=math.inf,
            maximizing=True,
            root_player=root_player,
        )

    def select_action(
        self,
        game: TurnBasedGame[StateT],
        state: StateT,
        legal_actions: Optional[Sequence[Action]] = None,
    ) -> Action:
        result = self.search(game, state)
        if result.column is None:
            raise ValueError("No legal actions available for minimax")
        if legal_actions is not None and result.column not in legal_actions:
            raise ValueError(f"Search chose column {result.column} outside {list(legal_actions)}")
        return result.column

    def _minimax(
        self,
        game: TurnBasedGame[StateT],
        state: StateT,
        depth: int,
        alpha: float,
        beta: float,
        maximizing: bool,
        root_player: int,
    ) -> SearchResult:
        self.nodes += 1

        if game.is_terminal(state):
            winner = game.winner(state)
            if winner == root_player:
                return SearchResult(self.config.win_score, None)
            if winner == -root_player:
                return SearchResult(-self.config.win_score, None)
            return SearchResult(0, None)

        legal_actions: List[Action] = list(game.legal_actions(state))
        if not legal_actions:
            return SearchResult(0, None)

        if depth == 0:
            return SearchResult(int(self.evaluator.evaluate(game, state, root_player)), None)

        best_action = legal_actions[0]
        value = -math.inf if maximizing else math.inf

        for action in legal_actions:
            child = self._minimax(
                game=game,
                state=game.apply_action(state, action),
                depth=depth - 1,
                alpha=alpha,
                beta=beta,
                maximizing=not maximizing,
                root_player=root_player,
            )

            if maximizing:
                if child.score > value:
                    value = child.score
                    best_action = action
                alpha = max(alpha, value)
            else:
                if child.score < value:
                    value = child.score
                    best_action = action
                beta = min(beta, value)

            if self.config.use_alpha_beta and beta <= alpha:
                break

        return SearchResult(int(value), best_action)
