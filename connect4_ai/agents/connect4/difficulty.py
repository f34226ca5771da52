"""Difficulty sources and play styles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Sequence, Union

from connect4_ai.config.schema import MAX_DIFFICULTY, MIN_DIFFICULTY, EngineConfig


class DifficultyTier(IntEnum):
    """Practice-mode tiers."""

    NOOB = 1
    AVERAGE = 4
    GOOD = 7
    PROFESSIONAL = 10


class PlayStyle(str, Enum):
    AGGRESSIVE = "aggressive"
    DEFENSIVE = "defensive"
    BALANCED = "balanced"
    OPPORTUNISTIC = "opportunistic"


@dataclass(frozen=True)
class SkillRating:
    """Ranked-mode skill rating (trophies) of the human opponent."""

    value: float


DifficultySource = Union[DifficultyTier, SkillRating, int]


def difficulty_from_rating(rating: float, bands: Sequence[Sequence[float]]) -> int:
    """Map a rating onto a difficulty using ``[upper_bound_exclusive, difficulty]`` bands."""
    for upper_bound, difficulty in bands:
        if rating < upper_bound:
            return int(difficulty)
    return MAX_DIFFICULTY


def resolve_difficulty(
    source: DifficultySource,
    config: Optional[EngineConfig] = None,
) -> int:
    """Turn a tier, rating or raw level into a difficulty in 1..10."""
    if isinstance(source, SkillRating):
        bands = (config or EngineConfig()).rating_bands
        return difficulty_from_rating(source.value, bands)
    if isinstance(source, bool) or not isinstance(source, int):
        raise ValueError(f"Unsupported difficulty source: {source!r}")
    level = int(source)
    if not MIN_DIFFICULTY <= level <= MAX_DIFFICULTY:
        raise ValueError(f"Difficulty must be within {MIN_DIFFICULTY}..{MAX_DIFFICULTY}, got {level}")
    return level
