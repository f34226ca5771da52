"""Connect4-specific search policies and value functions."""

from .heuristic_value_fn import Connect4HeuristicEvaluator, evaluate_position
from .heuristic_minimax import make_connect4_heuristic_minimax_policy, search_board

__all__ = [
    "Connect4HeuristicEvaluator",
    "evaluate_position",
    "make_connect4_heuristic_minimax_policy",
    "search_board",
]
