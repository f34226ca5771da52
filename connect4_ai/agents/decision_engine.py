"""Adaptive decision engine: one instance per match."""

from __future__ import annotations

import asyncio
import random
from collections import deque
from typing import Deque, List, Optional, Sequence

from connect4_ai.config.schema import MAX_DIFFICULTY, EngineConfig
from connect4_ai.games.connect4 import Board, Side
from .base_agent import BaseAgent
from .connect4.advisor import Hint, best_move, coaching_hint
from .connect4.difficulty import DifficultySource, PlayStyle, resolve_difficulty
from .connect4.policy import TURN_POLICY, Decision, PolicyStep, TurnContext, run_policy
from .connect4.profiler import MAX_MOVES, OpponentProfiler


class DecisionEngine(BaseAgent):
    """
    Non-human opponent whose strength scales with a 1..10 difficulty.

    Owns all per-match state: difficulty, play style, both move histories and
    the random source. Nothing is shared between instances, so concurrent
    matches each get their own engine.

    Args:
        difficulty_source: practice tier, skill rating, or raw level 1..10.
        config: engine tunables; defaults match the documented behaviour.
        seed: seed for the engine's private ``random.Random``.
        rng: explicit random source; takes precedence over ``seed``.
        style: fixed play style; drawn uniformly from ``rng`` when omitted.
    """

    side = Side.AI

    def __init__(
        self,
        difficulty_source: DifficultySource,
        *,
        config: Optional[EngineConfig] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        style: Optional[PlayStyle] = None,
        policy: Sequence[PolicyStep] = TURN_POLICY,
    ) -> None:
        self.config = config or EngineConfig()
        self.difficulty = resolve_difficulty(difficulty_source, self.config)
        self.rng = rng if rng is not None else random.Random(seed)
        self.style = style if style is not None else self.rng.choice(list(PlayStyle))
        self.policy = tuple(policy)
        self.profiler = OpponentProfiler(self.config.profiler, self.difficulty)
        self._own_moves: Deque[int] = deque(maxlen=MAX_MOVES)
        self.last_decision: Optional[Decision] = None

    @property
    def own_moves(self) -> List[int]:
        return list(self._own_moves)

    @property
    def opponent_moves(self) -> List[int]:
        return self.profiler.moves

    def observe_opponent_move(self, column: int) -> None:
        self.profiler.record(column)

    def thinking_delay(self) -> float:
        """Seconds to "think" before answering; lower difficulty thinks longer."""
        cfg = self.config.thinking
        millis = (
            cfg.base_ms
            + self.rng.random() * cfg.jitter_ms
            + (MAX_DIFFICULTY - self.difficulty) * cfg.per_level_ms
        )
        return millis * cfg.scale / 1000.0

    def decide(
        self,
        board: Board,
        is_first_move: bool = False,
        last_opponent_move: Optional[int] = None,
    ) -> Optional[int]:
        """Pick a column for ``board`` right away; None means no legal move."""
        if last_opponent_move is not None:
            self.observe_opponent_move(last_opponent_move)

        ctx = TurnContext(
            board=board,
            difficulty=self.difficulty,
            config=self.config,
            rng=self.rng,
            profiler=self.profiler,
            style=self.style,
            is_first_move=is_first_move,
            side=self.side,
        )
        decision = run_policy(ctx, self.policy)
        self.last_decision = decision
        if decision.column is not None:
            self._own_moves.append(decision.column)
        return decision.column

    async def choose_move(
        self,
        board: Board,
        is_first_move: bool = False,
        last_opponent_move: Optional[int] = None,
    ) -> Optional[int]:
        """
        Wait out the simulated thinking time, then decide on the snapshot.

        The sleep is the only suspension point; the choice itself is computed
        synchronously afterwards. Callers must check whether the match ended
        in the meantime before applying the column.
        """
        await asyncio.sleep(self.thinking_delay())
        return self.decide(board, is_first_move, last_opponent_move)

    def best_move(self, board: Board) -> Optional[int]:
        return best_move(board, self.side)

    def coaching_hint(self, board: Board) -> Optional[Hint]:
        return coaching_hint(board, self.side.opponent, self.config)

    def act(
        self,
        board: Board,
        legal_actions: Optional[Sequence[int]] = None,
    ) -> Optional[int]:
        return self.decide(board, is_first_move=board.move_count() <= 1)


def new_engine(
    difficulty_source: DifficultySource,
    *,
    config: Optional[EngineConfig] = None,
    seed: Optional[int] = None,
) -> DecisionEngine:
    """Create the engine for one match."""
    return DecisionEngine(difficulty_source, config=config, seed=seed)
