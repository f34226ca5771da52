"""
Ordered turn policy of the decision engine.

Each step is a (predicate, action) pair evaluated in a fixed order; the first
action that returns a column decides the turn. Steps read everything they
need from a :class:`TurnContext`, so each one can be exercised on its own.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from connect4_ai.config.schema import EngineConfig, tier_value
from connect4_ai.games.connect4 import Board, Side, available_columns, try_drop
from connect4_ai.search.connect4 import evaluate_position, search_board
from .difficulty import PlayStyle
from .profiler import (
    OpponentProfiler,
    PatternAnalysis,
    counter_columns,
    find_fork_move,
)
from .threats import find_winning_move, top_threat


@dataclass(frozen=True)
class Decision:
    column: Optional[int]
    step: str


@dataclass
class TurnContext:
    board: Board
    difficulty: int
    config: EngineConfig
    rng: random.Random
    profiler: OpponentProfiler
    style: PlayStyle = PlayStyle.BALANCED
    is_first_move: bool = False
    side: Side = Side.AI
    available: List[int] = field(default_factory=list)
    _analysis: Optional[PatternAnalysis] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if not self.available:
            self.available = available_columns(self.board)

    @property
    def analysis(self) -> PatternAnalysis:
        if self._analysis is None:
            self._analysis = self.profiler.analyze()
        return self._analysis


@dataclass(frozen=True)
class PolicyStep:
    order: int
    name: str
    applies: Callable[[TurnContext], bool]
    act: Callable[[TurnContext], Optional[int]]


def score_columns(board: Board, columns: Sequence[int], side: int) -> Dict[int, int]:
    """Static evaluation of the position after dropping ``side`` in each column."""
    scores: Dict[int, int] = {}
    for col in columns:
        next_board = try_drop(board, col, side)
        if next_board is not None:
            scores[col] = evaluate_position(next_board, side)
    return scores


def best_scored(scores: Dict[int, int]) -> Tuple[Optional[int], Optional[int]]:
    """Highest-scoring column; the leftmost one on ties."""
    best_col: Optional[int] = None
    best_score: Optional[int] = None
    for col in sorted(scores):
        if best_score is None or scores[col] > best_score:
            best_col, best_score = col, scores[col]
    return best_col, best_score


# ----------------------------------------------------------------------
# Steps
# ----------------------------------------------------------------------


def opening_move(ctx: TurnContext) -> Optional[int]:
    style = ctx.config.opening.styles.get(ctx.style.value)
    if style is None:
        return None
    if ctx.rng.random() >= style.probability:
        return None
    columns = [col for col in style.columns if col in ctx.available]
    if not columns:
        return None
    return ctx.rng.choice(columns)


def immediate_win(ctx: TurnContext) -> Optional[int]:
    return find_winning_move(ctx.board, ctx.side)


def probabilistic_block(ctx: TurnContext) -> Optional[int]:
    """Block a one-move loss, but only if this turn's blocking draw succeeds."""
    column = find_winning_move(ctx.board, ctx.side.opponent)
    if column is None:
        return None
    chance = tier_value(ctx.config.blocking.chances, ctx.difficulty)
    if ctx.rng.random() < chance:
        return column
    return None


def threat_block(ctx: TurnContext) -> Optional[int]:
    cfg = ctx.config.threats
    threat = top_threat(ctx.board, ctx.side)
    if threat is None:
        return None
    if threat.severity >= cfg.winning_severity:
        return threat.column
    if threat.severity >= cfg.building_severity:
        if ctx.difficulty >= cfg.always_min_difficulty:
            return threat.column
        if ctx.rng.random() < cfg.building_chance:
            return threat.column
    return None


def search_move(ctx: TurnContext) -> Optional[int]:
    cfg = ctx.config.search
    if ctx.rng.random() < tier_value(cfg.discard_chances, ctx.difficulty):
        return None
    depth = int(tier_value(cfg.depths, ctx.difficulty))
    return search_board(ctx.board, depth, side=ctx.side, win_score=cfg.win_score).column


def trap_move(ctx: TurnContext) -> Optional[int]:
    if not ctx.analysis.repeated_sequence:
        return None
    return find_fork_move(ctx.board, ctx.side, ctx.config.profiler.fork_min_wins)


def favored_counter_move(ctx: TurnContext) -> Optional[int]:
    cfg = ctx.config.profiler
    favored = ctx.analysis.favored_columns
    if not favored:
        return None
    if ctx.rng.random() >= cfg.counter_chance:
        return None
    scores = score_columns(ctx.board, counter_columns(favored, ctx.available), ctx.side)
    column, score = best_scored(scores)
    if column is None or score <= cfg.counter_min_score:
        return None
    return column


def strategic_move(ctx: TurnContext) -> Optional[int]:
    cfg = ctx.config.strategy
    scores = score_columns(ctx.board, ctx.available, ctx.side)
    column, score = best_scored(scores)
    # A column only qualifies with a non-negative evaluation
    if column is None or score < 0:
        return None

    if score > 0 and ctx.rng.random() < tier_value(cfg.variation_chances, ctx.difficulty):
        threshold = cfg.alternative_ratio * score
        alternatives = [c for c, s in scores.items() if c != column and s >= threshold]
        if alternatives:
            return ctx.rng.choice(sorted(alternatives))
    return column


def fallback_move(ctx: TurnContext) -> Optional[int]:
    if not ctx.available:
        return None
    cfg = ctx.config.strategy
    if ctx.difficulty >= cfg.center_min_difficulty:
        center = [col for col in cfg.center_columns if col in ctx.available]
        if center and ctx.rng.random() < cfg.center_chance:
            return ctx.rng.choice(center)
    return ctx.rng.choice(ctx.available)


def _always(ctx: TurnContext) -> bool:
    return True


TURN_POLICY: Tuple[PolicyStep, ...] = (
    PolicyStep(
        2, "opening",
        lambda ctx: ctx.is_first_move and ctx.difficulty >= ctx.config.opening.min_difficulty,
        opening_move,
    ),
    PolicyStep(3, "immediate_win", _always, immediate_win),
    PolicyStep(4, "block", _always, probabilistic_block),
    PolicyStep(
        5, "threat_block",
        lambda ctx: ctx.difficulty >= ctx.config.threats.min_difficulty,
        threat_block,
    ),
    PolicyStep(
        6, "search",
        lambda ctx: ctx.difficulty >= ctx.config.search.min_difficulty,
        search_move,
    ),
    PolicyStep(
        7, "trap",
        lambda ctx: ctx.difficulty >= ctx.config.profiler.sequence_min_difficulty,
        trap_move,
    ),
    PolicyStep(
        7, "favored_counter",
        lambda ctx: ctx.difficulty >= ctx.config.profiler.favored_min_difficulty,
        favored_counter_move,
    ),
    PolicyStep(
        8, "strategic",
        lambda ctx: ctx.difficulty >= ctx.config.strategy.min_difficulty,
        strategic_move,
    ),
    PolicyStep(9, "fallback", _always, fallback_move),
)


def run_policy(ctx: TurnContext, steps: Sequence[PolicyStep] = TURN_POLICY) -> Decision:
    """Evaluate ``steps`` in order; the first one that yields a column decides."""
    if not ctx.available:
        return Decision(None, "no_move")
    for step in steps:
        if not step.applies(ctx):
            continue
        column = step.act(ctx)
        if column is not None:
            return Decision(column, step.name)
    return Decision(None, "no_move")
