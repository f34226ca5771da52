"""Config package exports."""

from .schema import (
    BlockingConfig,
    EngineConfig,
    HintConfig,
    OpeningConfig,
    OpeningStyle,
    ProfilerConfig,
    SearchConfig,
    StrategyConfig,
    ThinkingConfig,
    ThreatConfig,
    load_config,
    tier_value,
)

__all__ = [
    "BlockingConfig",
    "EngineConfig",
    "HintConfig",
    "OpeningConfig",
    "OpeningStyle",
    "ProfilerConfig",
    "SearchConfig",
    "StrategyConfig",
    "ThinkingConfig",
    "ThreatConfig",
    "load_config",
    "tier_value",
]
