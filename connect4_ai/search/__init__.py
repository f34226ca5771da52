"""Search algorithms (minimax with alpha-beta) and evaluators."""

from .action_policy import ActionPolicy
from .minimax_policy import MinimaxConfig, MinimaxPolicy, SearchResult, WIN_SCORE

__all__ = [
    "ActionPolicy",
    "MinimaxPolicy",
    "MinimaxConfig",
    "SearchResult",
    "WIN_SCORE",
]
