from .calibration import (
    BLOCKING_COLUMNS,
    FORCED_BLOCK_BOARD,
    CalibrationReport,
    calibrate_tiers,
    measure_block_rate,
    measure_engine_block_rate,
    play_tiers,
)

__all__ = [
    "BLOCKING_COLUMNS",
    "FORCED_BLOCK_BOARD",
    "CalibrationReport",
    "calibrate_tiers",
    "measure_block_rate",
    "measure_engine_block_rate",
    "play_tiers",
]
