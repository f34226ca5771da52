"""Tests for configuration schemas."""

from __future__ import annotations

from pathlib import Path

import pytest

from connect4_ai.config import EngineConfig, load_config, tier_value

DEFAULT_CONFIG = Path(__file__).parent.parent / "configs" / "default.yaml"


def test_engine_config_parsing():
    """Test engine config parsing."""
    data = {
        "blocking": {"chances": [[5, 0.5], [10, 0.9]]},
        "search": {"depths": [[10, 2]]},
        "opening": {"styles": {"aggressive": {"probability": 1.0, "columns": [3, 4]}}},
        "thinking": {"scale": 0.0},
        "rating_bands": [[100, 3]],
    }

    cfg = EngineConfig.from_dict(data)
    assert tier_value(cfg.blocking.chances, 4) == 0.5
    assert tier_value(cfg.blocking.chances, 6) == 0.9
    assert tier_value(cfg.search.depths, 10) == 2
    assert cfg.opening.styles["aggressive"].columns == [3, 4]
    # untouched styles keep their defaults
    assert cfg.opening.styles["defensive"].columns == [2, 4]
    assert cfg.thinking.scale == 0.0
    assert cfg.rating_bands == [[100, 3]]
    assert cfg.threats.min_difficulty == 5


def test_default_tiers():
    """Default tier tables give the expected values."""
    cfg = EngineConfig()
    assert [tier_value(cfg.blocking.chances, d) for d in range(1, 11)] == [
        0.67, 0.67, 0.67, 0.80, 0.80, 0.80, 0.95, 0.95, 0.99, 0.99,
    ]
    assert [tier_value(cfg.search.depths, d) for d in (8, 9, 10)] == [3, 4, 5]


def test_default_yaml_matches_defaults():
    """Shipped yaml equals the dataclass defaults."""
    assert load_config(DEFAULT_CONFIG) == EngineConfig()


def test_load_config(tmp_path):
    """Test load config."""
    path = tmp_path / "engine.yaml"
    path.write_text("hints:\n  min_score: 5\n")
    assert load_config(path).hints.min_score == 5

    empty = tmp_path / "empty.yaml"
    empty.write_text("")
    assert load_config(empty) == EngineConfig()


def test_load_config_rejects_non_mapping(tmp_path):
    """Config files must hold a mapping."""
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_config(path)


@pytest.mark.parametrize(
    "data",
    [
        {"blocking": {"chances": [[10, 1.5]]}},
        {"blocking": {"chances": [[5, 0.5]]}},
        {"search": {"depths": [[10, 0]]}},
        {"threats": {"building_chance": -0.1}},
        {"thinking": {"scale": -1.0}},
        {"rating_bands": [[50, 5], [20, 6]]},
        {"rating_bands": [[50, 5], [100, 4]]},
        {"opening": {"styles": {"aggressive": {"probability": 0.5, "columns": []}}}},
    ],
)
def test_invalid_values_rejected(data):
    """Out-of-range config values raise ValueError."""
    with pytest.raises(ValueError):
        EngineConfig.from_dict(data)
