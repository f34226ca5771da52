"""Statistical calibration of the difficulty tiers."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from connect4_ai.agents.connect4.policy import TurnContext, probabilistic_block
from connect4_ai.agents.connect4.profiler import OpponentProfiler
from connect4_ai.agents.decision_engine import DecisionEngine
from connect4_ai.config.schema import MAX_DIFFICULTY, MIN_DIFFICULTY, EngineConfig
from connect4_ai.games.connect4 import Board
from connect4_ai.registry import make_agent
from connect4_ai.utils.match import MatchResults, play_match

# Opponent three-in-a-row on the bottom row, open at both ends (columns 0 and 4)
FORCED_BLOCK_BOARD = Board.from_strings(
    [
        ".......",
        ".......",
        ".......",
        ".......",
        ".......",
        ".XXX...",
    ]
)
BLOCKING_COLUMNS = (0, 4)


@dataclass
class CalibrationReport:
    trials: int
    rates: Dict[int, float] = field(default_factory=dict)

    @property
    def monotonic(self) -> bool:
        ordered = [self.rates[level] for level in sorted(self.rates)]
        return all(a <= b for a, b in zip(ordered, ordered[1:]))


def measure_block_rate(
    difficulty: int,
    trials: int = 10000,
    seed: int = 0,
    config: Optional[EngineConfig] = None,
) -> float:
    """
    Fraction of turns in which the one-move block fires on the forced-block board.

    Only the block gate is replayed, so the rate isolates the per-tier
    blocking chance from the later steps that may also end up blocking.
    """
    if trials <= 0:
        raise ValueError(f"trials must be positive, got {trials}")
    config = config or EngineConfig()
    rng = random.Random(seed)
    profiler = OpponentProfiler(config.profiler, difficulty)

    blocked = 0
    for _ in range(trials):
        ctx = TurnContext(
            board=FORCED_BLOCK_BOARD,
            difficulty=difficulty,
            config=config,
            rng=rng,
            profiler=profiler,
        )
        if probabilistic_block(ctx) in BLOCKING_COLUMNS:
            blocked += 1
    return blocked / trials


def measure_engine_block_rate(
    difficulty: int,
    trials: int = 1000,
    seed: int = 0,
    config: Optional[EngineConfig] = None,
) -> float:
    """Fraction of full engine decisions on the forced-block board that block."""
    if trials <= 0:
        raise ValueError(f"trials must be positive, got {trials}")
    rng = random.Random(seed)
    engine = DecisionEngine(difficulty, config=config, rng=rng)

    blocked = 0
    for _ in range(trials):
        if engine.decide(FORCED_BLOCK_BOARD) in BLOCKING_COLUMNS:
            blocked += 1
    return blocked / trials


def calibrate_tiers(
    difficulties: Optional[Iterable[int]] = None,
    trials: int = 10000,
    seed: int = 0,
    config: Optional[EngineConfig] = None,
) -> CalibrationReport:
    """
    Measure the block rate for each difficulty.

    Every difficulty replays the same seeded draws, so a higher blocking
    chance blocks in a superset of the trials a lower one does.
    """
    levels: List[int] = list(
        difficulties if difficulties is not None else range(MIN_DIFFICULTY, MAX_DIFFICULTY + 1)
    )
    report = CalibrationReport(trials=trials)
    for level in levels:
        report.rates[level] = measure_block_rate(level, trials=trials, seed=seed, config=config)
    return report


def play_tiers(
    opponent_id: str = "random",
    difficulties: Optional[Iterable[int]] = None,
    games: int = 20,
    seed: int = 0,
    config: Optional[EngineConfig] = None,
) -> Dict[int, MatchResults]:
    """
    Play ``games`` full games per difficulty against a registered sparring agent.

    Both the engine and the opponent are built through the agent registry.
    """
    levels: List[int] = list(
        difficulties if difficulties is not None else range(MIN_DIFFICULTY, MAX_DIFFICULTY + 1)
    )
    results: Dict[int, MatchResults] = {}
    for level in levels:
        opponent = make_agent(opponent_id, seed=seed)
        results[level] = play_match(
            lambda game_seed: make_agent(
                "adaptive", difficulty_source=level, config=config, seed=game_seed
            ),
            opponent,
            num_games=games,
            seed=seed,
            randomize_first_player=True,
        )
    return results
