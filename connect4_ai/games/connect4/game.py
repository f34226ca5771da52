"""Connect4 game rules (immutable state, for search algorithms)."""

from __future__ import annotations

from typing import Optional, Sequence

from .board import (
    Board,
    GameStatus,
    Side,
    available_columns,
    evaluate_outcome,
    is_full,
    landing_row,
    try_drop,
)
from .state import Connect4State
from .utils import WINDOW_LENGTH, check_n_in_row
from connect4_ai.games.turn_based_game import TurnBasedGame, Action


class Connect4Game(TurnBasedGame[Connect4State]):
    """
    Pure Connect4 rules over immutable boards: state transitions only.
    """

    def state_from_board(self, board: Board, to_move: int = Side.AI) -> Connect4State:
        """Wrap an externally owned board snapshot in a search state."""
        outcome = evaluate_outcome(board)
        if outcome.status is GameStatus.WIN:
            winner: Optional[int] = int(outcome.winner)
        elif outcome.status is GameStatus.DRAW:
            winner = 0
        else:
            winner = None
        return Connect4State(
            board=board,
            to_move=int(to_move),
            winner=winner,
            done=outcome.is_over,
        )

    def legal_actions(self, state: Connect4State) -> Sequence[Action]:
        return available_columns(state.board)

    def apply_action(self, state: Connect4State, action: Action) -> Connect4State:
        if state.done:
            raise ValueError("Cannot apply action in terminal state")

        row = landing_row(state.board, action)
        board = try_drop(state.board, action, state.to_move)
        if board is None or row is None:
            raise ValueError(f"Illegal action: {action}")

        winner: Optional[int] = None
        done = False

        if check_n_in_row(
            board.cells, row, action, state.to_move,
            n=WINDOW_LENGTH, rows=board.rows, cols=board.cols,
        ):
            winner = state.to_move
            done = True
        elif is_full(board):
            winner = 0
            done = True

        return Connect4State(
            board=board,
            to_move=-state.to_move,
            winner=winner,
            done=done,
            last_move=(row, action),
        )

    def current_player(self, state: Connect4State) -> int:
        return state.to_move

    def is_terminal(self, state: Connect4State) -> bool:
        return state.done

    def winner(self, state: Connect4State) -> Optional[int]:
        return state.winner
