"""Adaptive Connect4 opponent: board model, search, and tiered decision engine."""

from .agents import DecisionEngine, new_engine
from .agents.connect4 import DifficultyTier, Hint, PlayStyle, SkillRating
from .config import EngineConfig, load_config
from .games.connect4 import Board, GameStatus, Outcome, Side

__all__ = [
    "Board",
    "DecisionEngine",
    "DifficultyTier",
    "EngineConfig",
    "GameStatus",
    "Hint",
    "Outcome",
    "PlayStyle",
    "Side",
    "SkillRating",
    "load_config",
    "new_engine",
]
