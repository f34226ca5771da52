"""Statistical checks of the per-tier blocking rates."""

from __future__ import annotations

import pytest

from connect4_ai.config import EngineConfig, tier_value
from connect4_ai.evaluation import (
    calibrate_tiers,
    measure_block_rate,
    measure_engine_block_rate,
    play_tiers,
)

TRIALS = 10000


def test_block_rates_match_tiers_and_are_monotonic():
    """Measured block rates match each tier's chance."""
    config = EngineConfig()
    report = calibrate_tiers(trials=TRIALS, seed=2024, config=config)

    assert sorted(report.rates) == list(range(1, 11))
    for level, rate in report.rates.items():
        assert abs(rate - tier_value(config.blocking.chances, level)) < 0.02
    assert report.monotonic


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_monotonic_for_any_seed(seed):
    """Block rates never drop as difficulty rises."""
    assert calibrate_tiers(trials=2000, seed=seed).monotonic


def test_engine_blocks_at_least_as_often_as_gate():
    """Full engine blocks at least as often as the gate alone."""
    # later steps can still block after a missed gate
    gate = measure_block_rate(4, trials=1000, seed=3)
    engine = measure_engine_block_rate(4, trials=1000, seed=3)
    assert engine >= gate - 0.05


def test_invalid_trials():
    """Trial count must be positive."""
    with pytest.raises(ValueError):
        measure_block_rate(5, trials=0)


def test_play_tiers_against_registered_opponent():
    """Each requested level plays the requested number of games."""
    results = play_tiers("random", difficulties=[1, 2], games=2, seed=0)
    assert set(results) == {1, 2}
    for level_results in results.values():
        assert level_results.games == 2
        assert sum(level_results.steps.values()) > 0
