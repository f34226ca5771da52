"""Heuristic minimax search for Connect4 boards."""

from __future__ import annotations

from connect4_ai.games.connect4 import Board, Connect4Game, Connect4State, Side
from ..minimax_policy import MinimaxConfig, MinimaxPolicy, SearchResult, WIN_SCORE
from .heuristic_value_fn import Connect4HeuristicEvaluator


def make_connect4_heuristic_minimax_policy(
    *,
    depth: int = 3,
    use_alpha_beta: bool = True,
    win_score: int = WIN_SCORE,
) -> MinimaxPolicy[Connect4State]:
    config = MinimaxConfig(
        depth=depth,
        use_alpha_beta=use_alpha_beta,
        win_score=win_score,
    )
    return MinimaxPolicy[Connect4State](
        evaluator=Connect4HeuristicEvaluator(),
        config=config,
    )


def search_board(
    board: Board,
    depth: int,
    *,
    side: Side = Side.AI,
    use_alpha_beta: bool = True,
    win_score: int = WIN_SCORE,
) -> SearchResult:
    """Search ``board`` with ``side`` to move (and maximizing)."""
    game = Connect4Game()
    policy = make_connect4_heuristic_minimax_policy(
        depth=depth, use_alpha_beta=use_alpha_beta, win_score=win_score
    )
    return policy.search(game, game.state_from_board(board, to_move=side))
