from __future__ import annotations

from .state_evaluator import StateEvaluator
from .turn_based_game import Action, TurnBasedGame

__all__ = ["Action", "TurnBasedGame", "StateEvaluator"]
