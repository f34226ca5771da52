"""CLI for measuring per-tier blocking rates."""

import sys
from typing import Literal, Optional

import tyro

from connect4_ai.config import EngineConfig, load_config, tier_value
from connect4_ai.evaluation import calibrate_tiers, play_tiers
from connect4_ai.utils import MetricsLogger


def calibrate(
    trials: int = 10000,
    seed: int = 0,
    config_path: Optional[str] = None,
    log_dir: str = "data/logs",
    sparring: Optional[Literal["random", "heuristic"]] = None,
    games: int = 20,
):
    """
    Replay the one-move block on the forced-block board for every difficulty.

    Args:
        trials: Number of trials per difficulty
        seed: Random seed shared by every difficulty
        config_path: Optional YAML config overriding the defaults
        log_dir: Directory for the CSV with the measured rates
        sparring: Also play full games per difficulty against this registered agent
        games: Number of sparring games per difficulty
    """
    config = load_config(config_path) if config_path else EngineConfig()

    print("=" * 50)
    print("Difficulty calibration")
    print("=" * 50)
    print(f"Trials per tier: {trials}")
    print()

    report = calibrate_tiers(trials=trials, seed=seed, config=config)

    with MetricsLogger(log_dir=log_dir, prefix="calibration") as logger:
        for level, rate in sorted(report.rates.items()):
            expected = tier_value(config.blocking.chances, level)
            logger.log_dict({"block_rate": rate, "expected": expected}, step=level)
            print(f"Difficulty {level:2d}: block rate {rate:.4f} (expected {expected:.2f})")
        print()
        print(f"Results written to {logger.csv_path}")

    if sparring is not None:
        print()
        print(f"Sparring against {sparring} ({games} games per tier)")
        results = play_tiers(sparring, games=games, seed=seed, config=config)
        with MetricsLogger(log_dir=log_dir, prefix=f"sparring_{sparring}") as logger:
            for level, result in sorted(results.items()):
                logger.log_dict(
                    {
                        "engine_wins": result.engine_wins,
                        "draws": result.draws,
                        "opponent_wins": result.opponent_wins,
                    },
                    step=level,
                )
                print(
                    f"Difficulty {level:2d}: W {result.engine_wins} / D {result.draws} "
                    f"/ L {result.opponent_wins}"
                )
        print()

    if report.monotonic:
        print("Block rates are non-decreasing in difficulty.")
    else:
        print("Warning: block rates are NOT monotonic in difficulty!")
        sys.exit(1)


if __name__ == "__main__":
    tyro.cli(calibrate)
