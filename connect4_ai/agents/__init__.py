"""Agent modules."""

from .base_agent import BaseAgent
from .random_agent import RandomAgent
from .heuristic_agent import HeuristicAgent
from .decision_engine import DecisionEngine, new_engine
from ..registry import list_agents, register_agent

if "random" not in list_agents():
    register_agent("random", RandomAgent)
if "heuristic" not in list_agents():
    register_agent("heuristic", HeuristicAgent)
if "adaptive" not in list_agents():
    register_agent("adaptive", DecisionEngine)

__all__ = [
    "BaseAgent",
    "RandomAgent",
    "HeuristicAgent",
    "DecisionEngine",
    "new_engine",
]
