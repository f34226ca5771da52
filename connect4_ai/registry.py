"""Central registry of agent constructors."""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable


AgentFactory = Callable[..., Any]

_AGENT_REGISTRY: Dict[str, AgentFactory] = {}


def register_agent(agent_id: str, ctor: AgentFactory) -> None:
    """Register an agent constructor."""
    if agent_id in _AGENT_REGISTRY:
        raise ValueError(f"Agent id '{agent_id}' is already registered.")
    _AGENT_REGISTRY[agent_id] = ctor


def make_agent(agent_id: str, **kwargs: Any) -> Any:
    """Instantiate a registered agent."""
    if agent_id not in _AGENT_REGISTRY:
        raise KeyError(f"Agent id '{agent_id}' is not registered.")
    return _AGENT_REGISTRY[agent_id](**kwargs)


def list_agents() -> Iterable[str]:
    """Return iterable of registered agent identifiers."""
    return tuple(_AGENT_REGISTRY.keys())

