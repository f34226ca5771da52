"""Line-window heuristic for Connect4 positions."""

from __future__ import annotations

import numpy as np

from connect4_ai.games.connect4 import Board, Connect4State, window_cells
from connect4_ai.games.state_evaluator import StateEvaluator
from connect4_ai.games.turn_based_game import TurnBasedGame

OWN_THREE_SCORE = 5
OWN_TWO_SCORE = 2
OPP_THREE_PENALTY = 4


def evaluate_position(board: Board, side: int) -> int:
    """
    Score ``board`` for ``side`` by summing over all 69 four-cell windows.

    Each window contributes +5 for three own pieces and one empty cell,
    +2 for two own pieces and two empty cells, -4 for three opponent pieces
    and one empty cell, and nothing otherwise. Mixed windows never score.
    """
    windows = window_cells(board.cells)
    own = np.count_nonzero(windows == side, axis=1)
    opp = np.count_nonzero(windows == -side, axis=1)
    empty = 4 - own - opp

    own_three = np.count_nonzero((own == 3) & (empty == 1))
    own_two = np.count_nonzero((own == 2) & (empty == 2))
    opp_three = np.count_nonzero((opp == 3) & (empty == 1))

    return int(
        OWN_THREE_SCORE * own_three
        + OWN_TWO_SCORE * own_two
        - OPP_THREE_PENALTY * opp_three
    )


class Connect4HeuristicEvaluator(StateEvaluator[Connect4State]):
    """Static window score from the root player's perspective."""

    def evaluate(
        self,
        game: TurnBasedGame[Connect4State],
        state: Connect4State,
        root_player: int,
    ) -> float:
        return evaluate_position(state.board, root_player)
