"""Connect4 decision components used by the engine."""

from .advisor import Hint, best_move, center_column, coaching_hint
from .difficulty import (
    DifficultySource,
    DifficultyTier,
    PlayStyle,
    SkillRating,
    difficulty_from_rating,
    resolve_difficulty,
)
from .policy import TURN_POLICY, Decision, PolicyStep, TurnContext, run_policy
from .profiler import OpponentProfiler, PatternAnalysis, find_fork_move
from .threats import ThreatRecord, column_threat, find_winning_move, rank_threats, top_threat

__all__ = [
    "Decision",
    "DifficultySource",
    "DifficultyTier",
    "Hint",
    "OpponentProfiler",
    "PatternAnalysis",
    "PlayStyle",
    "PolicyStep",
    "SkillRating",
    "TURN_POLICY",
    "ThreatRecord",
    "TurnContext",
    "best_move",
    "center_column",
    "coaching_hint",
    "column_threat",
    "difficulty_from_rating",
    "find_fork_move",
    "find_winning_move",
    "rank_threats",
    "resolve_difficulty",
    "run_policy",
    "top_threat",
]
