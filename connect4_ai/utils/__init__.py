"""Utility modules."""

from .metrics import MetricsLogger
from .match import Match, MatchResults, play_game, play_match

__all__ = ["MetricsLogger", "Match", "MatchResults", "play_game", "play_match"]
