"""Match controller and utilities for playing games against the engine."""

from __future__ import annotations

import random
from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from connect4_ai.agents.base_agent import BaseAgent
from connect4_ai.agents.decision_engine import DecisionEngine
from connect4_ai.games.connect4 import (
    Board,
    GameStatus,
    Outcome,
    Side,
    drop,
    evaluate_outcome,
)


class Match:
    """
    One game between a human and a decision engine.

    The match owns the board; the engine only ever sees snapshots of it.
    """

    def __init__(
        self,
        engine: DecisionEngine,
        board: Optional[Board] = None,
        human_first: bool = True,
    ) -> None:
        self.engine = engine
        self.board = board if board is not None else Board.empty()
        self.to_move = Side.PLAYER if human_first else Side.AI
        self.outcome: Outcome = evaluate_outcome(self.board)
        self.forfeited_by: Optional[Side] = None
        self.history: List[Tuple[Side, int]] = []
        self._pending_human_move: Optional[int] = None
        self._ai_moves = 0

    @property
    def is_over(self) -> bool:
        return self.outcome.is_over or self.forfeited_by is not None

    @property
    def winner(self) -> Optional[Side]:
        if self.forfeited_by is not None:
            return self.forfeited_by.opponent
        return self.outcome.winner

    def forfeit(self, side: Side = Side.PLAYER) -> None:
        if not self.is_over:
            self.forfeited_by = side

    def _apply(self, side: Side, column: int) -> None:
        self.board = drop(self.board, column, side)
        self.history.append((side, column))
        self.outcome = evaluate_outcome(self.board)
        self.to_move = side.opponent

    def human_turn(self, column: int) -> Outcome:
        """Apply the human's column; illegal columns raise ``IllegalMoveError``."""
        if self.is_over:
            raise ValueError("Match is already over")
        if self.to_move is not Side.PLAYER:
            raise ValueError("It is not the human's turn")
        self._apply(Side.PLAYER, column)
        self._pending_human_move = column
        return self.outcome

    async def ai_turn(self) -> Optional[int]:
        """
        Let the engine think and play.

        Returns the column played, or None when the result was discarded
        because the match ended while the engine was thinking, or when no
        column was legal (recorded as a draw).
        """
        if self.is_over:
            raise ValueError("Match is already over")
        if self.to_move is not Side.AI:
            raise ValueError("It is not the engine's turn")

        last_move, self._pending_human_move = self._pending_human_move, None
        column = await self.engine.choose_move(
            self.board,
            is_first_move=self._ai_moves == 0,
            last_opponent_move=last_move,
        )

        # The match may have ended (forfeit) during the thinking delay
        if self.is_over:
            return None
        if column is None:
            self.outcome = Outcome(GameStatus.DRAW)
            return None

        self._apply(Side.AI, column)
        self._ai_moves += 1
        return column


@dataclass
class MatchResults:
    engine_wins: int = 0
    draws: int = 0
    opponent_wins: int = 0
    steps: Counter = field(default_factory=Counter)

    @property
    def games(self) -> int:
        return self.engine_wins + self.draws + self.opponent_wins


def play_game(
    engine: DecisionEngine,
    opponent: BaseAgent,
    engine_first: bool = False,
    steps: Optional[Counter] = None,
) -> Outcome:
    """Play one synchronous game (no thinking delay) and return its outcome."""
    board = Board.empty()
    to_move = Side.AI if engine_first else Side.PLAYER
    outcome = evaluate_outcome(board)
    last_opponent_move: Optional[int] = None
    engine_moves = 0

    while not outcome.is_over:
        if to_move is Side.AI:
            column = engine.decide(
                board,
                is_first_move=engine_moves == 0,
                last_opponent_move=last_opponent_move,
            )
            last_opponent_move = None
            if steps is not None and engine.last_decision is not None:
                steps[engine.last_decision.step] += 1
            engine_moves += 1
        else:
            column = opponent.act(board)
            last_opponent_move = column

        if column is None:
            return Outcome(GameStatus.DRAW)
        board = drop(board, column, to_move)
        outcome = evaluate_outcome(board)
        to_move = to_move.opponent

    return outcome


def play_match(
    engine_factory: Callable[[int], DecisionEngine],
    opponent: BaseAgent,
    num_games: int = 10,
    seed: Optional[int] = None,
    randomize_first_player: bool = False,
) -> MatchResults:
    """
    Play ``num_games`` games, each against a fresh engine.

    Args:
        engine_factory: Called with a per-game seed; returns a new engine.
        opponent: Sparring agent playing the human side.
        num_games: Number of games to play.
        seed: Base seed for reproducibility.
        randomize_first_player: If True, randomly choose who goes first each game.
                               If False, the opponent always goes first.

    Returns:
        Aggregated results including how often each policy step decided a move.
    """
    rng = random.Random(seed)
    results = MatchResults()

    for game_idx in range(num_games):
        game_seed = (seed or 0) + game_idx
        engine = engine_factory(game_seed)
        engine_first = randomize_first_player and rng.random() < 0.5
        outcome = play_game(engine, opponent, engine_first=engine_first, steps=results.steps)

        if outcome.winner is Side.AI:
            results.engine_wins += 1
        elif outcome.winner is Side.PLAYER:
            results.opponent_wins += 1
        else:
            results.draws += 1

    return results
