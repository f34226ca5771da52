"""Configuration schema for the decision engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Sequence, Union

import yaml

# Ordered [max_difficulty, value] rows; the first row whose bound covers the
# difficulty wins.
TierTable = List[List[float]]

MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 10


def tier_value(table: Sequence[Sequence[float]], difficulty: int) -> float:
    """Look up the value for ``difficulty`` in a ``[max_difficulty, value]`` table."""
    for max_difficulty, value in table:
        if difficulty <= max_difficulty:
            return value
    return table[-1][1]


def _check_probability(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be between 0.0 and 1.0, got {value}")


def _check_tier_table(name: str, table: Sequence[Sequence[float]]) -> None:
    if not table:
        raise ValueError(f"{name} must not be empty")
    bounds = [row[0] for row in table]
    if any(len(row) != 2 for row in table):
        raise ValueError(f"{name} rows must be [max_difficulty, value] pairs")
    if bounds != sorted(bounds):
        raise ValueError(f"{name} bounds must be ascending, got {bounds}")
    if bounds[-1] < MAX_DIFFICULTY:
        raise ValueError(f"{name} must cover difficulty {MAX_DIFFICULTY}")


@dataclass
class BlockingConfig:
    """Chance of attempting the one-move block, per difficulty tier."""

    chances: TierTable = field(
        default_factory=lambda: [[3, 0.67], [6, 0.80], [8, 0.95], [10, 0.99]]
    )

    def __post_init__(self) -> None:
        _check_tier_table("blocking.chances", self.chances)
        for _, chance in self.chances:
            _check_probability("blocking.chances", chance)


@dataclass
class ThreatConfig:
    min_difficulty: int = 5
    always_min_difficulty: int = 7
    winning_severity: int = 100
    building_severity: int = 50
    building_chance: float = 0.7

    def __post_init__(self) -> None:
        _check_probability("threats.building_chance", self.building_chance)


@dataclass
class SearchConfig:
    min_difficulty: int = 8
    depths: TierTable = field(default_factory=lambda: [[8, 3], [9, 4], [10, 5]])
    discard_chances: TierTable = field(
        default_factory=lambda: [[8, 0.08], [9, 0.08], [10, 0.03]]
    )
    win_score: int = 100000

    def __post_init__(self) -> None:
        _check_tier_table("search.depths", self.depths)
        _check_tier_table("search.discard_chances", self.discard_chances)
        for _, depth in self.depths:
            if depth < 1:
                raise ValueError(f"search.depths must be >= 1, got {depth}")
        for _, chance in self.discard_chances:
            _check_probability("search.discard_chances", chance)


@dataclass
class ProfilerConfig:
    record_min_difficulty: int = 6
    favored_min_difficulty: int = 7
    favored_min_moves: int = 4
    favored_threshold: int = 3
    favored_top: int = 3
    sequence_min_difficulty: int = 8
    sequence_min_moves: int = 8
    sequence_window: int = 6
    sequence_pairs: int = 3
    sequence_min_matches: int = 2
    sequence_tolerance: int = 1
    fork_min_wins: int = 2
    counter_chance: float = 0.4
    counter_min_score: int = 2

    def __post_init__(self) -> None:
        _check_probability("profiler.counter_chance", self.counter_chance)


@dataclass
class StrategyConfig:
    min_difficulty: int = 5
    variation_chances: TierTable = field(default_factory=lambda: [[7, 0.15], [10, 0.12]])
    alternative_ratio: float = 0.7
    center_columns: List[int] = field(default_factory=lambda: [2, 3, 4])
    center_chance: float = 0.7
    center_min_difficulty: int = 3

    def __post_init__(self) -> None:
        _check_tier_table("strategy.variation_chances", self.variation_chances)
        for _, chance in self.variation_chances:
            _check_probability("strategy.variation_chances", chance)
        _check_probability("strategy.center_chance", self.center_chance)


@dataclass
class OpeningStyle:
    probability: float
    columns: List[int]

    def __post_init__(self) -> None:
        _check_probability("opening probability", self.probability)
        if not self.columns:
            raise ValueError("opening style needs at least one column")


def _default_styles() -> Dict[str, OpeningStyle]:
    return {
        "aggressive": OpeningStyle(probability=0.8, columns=[3]),
        "defensive": OpeningStyle(probability=0.6, columns=[2, 4]),
        "balanced": OpeningStyle(probability=0.5, columns=[2, 3, 4]),
        "opportunistic": OpeningStyle(probability=0.4, columns=[1, 5]),
    }


@dataclass
class OpeningConfig:
    min_difficulty: int = 3
    styles: Dict[str, OpeningStyle] = field(default_factory=_default_styles)


@dataclass
class ThinkingConfig:
    """Simulated thinking time: base + U(0,1) * jitter + (10 - difficulty) * per_level."""

    base_ms: float = 500.0
    jitter_ms: float = 1000.0
    per_level_ms: float = 200.0
    scale: float = 1.0

    def __post_init__(self) -> None:
        if self.scale < 0:
            raise ValueError("thinking.scale must be non-negative")


@dataclass
class HintConfig:
    min_score: int = 3


@dataclass
class EngineConfig:
    blocking: BlockingConfig = field(default_factory=BlockingConfig)
    threats: ThreatConfig = field(default_factory=ThreatConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    profiler: ProfilerConfig = field(default_factory=ProfilerConfig)
    strategy: StrategyConfig = field(default_factory=StrategyConfig)
    opening: OpeningConfig = field(default_factory=OpeningConfig)
    thinking: ThinkingConfig = field(default_factory=ThinkingConfig)
    hints: HintConfig = field(default_factory=HintConfig)
    # [upper_bound_exclusive, difficulty]; ratings past the last bound map to 10
    rating_bands: List[List[float]] = field(
        default_factory=lambda: [
            [16, 1], [46, 2], [91, 3], [151, 5], [226, 7], [301, 8], [401, 9],
        ]
    )

    def __post_init__(self) -> None:
        bounds = [band[0] for band in self.rating_bands]
        levels = [band[1] for band in self.rating_bands]
        if bounds != sorted(bounds) or levels != sorted(levels):
            raise ValueError("rating_bands must be monotonically non-decreasing")
        if any(not MIN_DIFFICULTY <= level <= MAX_DIFFICULTY for level in levels):
            raise ValueError("rating_bands difficulties must be within 1..10")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EngineConfig":
        opening_data = dict(data.get("opening", {}))
        styles = _default_styles()
        for name, style in opening_data.pop("styles", {}).items():
            styles[str(name)] = OpeningStyle(
                probability=float(style["probability"]),
                columns=[int(c) for c in style["columns"]],
            )
        opening = OpeningConfig(
            min_difficulty=int(opening_data.get("min_difficulty", 3)),
            styles=styles,
        )

        kwargs: Dict[str, Any] = dict(
            blocking=BlockingConfig(**data.get("blocking", {})),
            threats=ThreatConfig(**data.get("threats", {})),
            search=SearchConfig(**data.get("search", {})),
            profiler=ProfilerConfig(**data.get("profiler", {})),
            strategy=StrategyConfig(**data.get("strategy", {})),
            opening=opening,
            thinking=ThinkingConfig(**data.get("thinking", {})),
            hints=HintConfig(**data.get("hints", {})),
        )
        if "rating_bands" in data:
            kwargs["rating_bands"] = [list(band) for band in data["rating_bands"]]
        return cls(**kwargs)


def load_config(path: Union[str, Path]) -> EngineConfig:
    """Load EngineConfig from a YAML file."""
    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data)}")
    return EngineConfig.from_dict(data)
