"""Tests for the adaptive decision engine."""

from __future__ import annotations

import asyncio

import pytest

from connect4_ai import (
    Board,
    DecisionEngine,
    DifficultyTier,
    EngineConfig,
    PlayStyle,
    Side,
    SkillRating,
    new_engine,
)
from connect4_ai.agents.connect4 import resolve_difficulty
from connect4_ai.config import SearchConfig, ThinkingConfig


def _instant_config(**kwargs) -> EngineConfig:
    return EngineConfig(thinking=ThinkingConfig(scale=0.0), **kwargs)


@pytest.mark.parametrize("difficulty", range(1, 11))
def test_takes_immediate_win_at_every_difficulty(difficulty, ai_win_board):
    """Every tier takes a winning column."""
    for seed in range(5):
        engine = DecisionEngine(difficulty, seed=seed)
        assert engine.decide(ai_win_board) == 3
        assert engine.last_decision.step == "immediate_win"


def test_professional_blocks_open_three(forced_block_board):
    """Top tier always blocks an open three."""
    for seed in range(200):
        engine = DecisionEngine(DifficultyTier.PROFESSIONAL, seed=seed)
        assert engine.decide(forced_block_board) in (0, 4)


def test_full_board_yields_no_move(draw_board):
    """Engine returns None on a full board."""
    engine = DecisionEngine(10, seed=0, config=_instant_config())
    assert engine.decide(draw_board) is None
    assert engine.last_decision.step == "no_move"
    assert asyncio.run(engine.choose_move(draw_board)) is None
    assert engine.best_move(draw_board) is None
    assert engine.coaching_hint(draw_board) is None


def test_sets_trap_against_repeating_opponent(fork_board):
    """Engine plays the fork against a predictable opponent."""
    config = EngineConfig(search=SearchConfig(discard_chances=[[10, 1.0]]))
    engine = DecisionEngine(8, seed=0, config=config)
    for move in [0, 1, 2] * 4:
        engine.observe_opponent_move(move)

    assert engine.decide(fork_board) == 3
    assert engine.last_decision.step == "trap"


def test_no_trap_without_history(fork_board):
    """No trap without recorded opponent moves."""
    config = EngineConfig(search=SearchConfig(discard_chances=[[10, 1.0]]))
    engine = DecisionEngine(8, seed=0, config=config)
    engine.decide(fork_board)
    assert engine.last_decision.step != "trap"


def test_choose_move_is_async(ai_win_board):
    """Test choose move is async."""
    engine = DecisionEngine(5, seed=0, config=_instant_config())
    assert asyncio.run(engine.choose_move(ai_win_board, last_opponent_move=1)) == 3
    assert engine.own_moves == [3]
    # profiling is off below difficulty 6
    assert engine.opponent_moves == []


def test_histories_are_tracked(empty_board):
    """Engine records its own and the opponent's moves."""
    engine = DecisionEngine(7, seed=0)
    column = engine.decide(empty_board, is_first_move=True, last_opponent_move=4)
    assert engine.opponent_moves == [4]
    assert engine.own_moves == [column]


def test_thinking_delay_bounds():
    """Thinking delay stays inside the configured range."""
    for seed in range(20):
        fast = DecisionEngine(10, seed=seed).thinking_delay()
        slow = DecisionEngine(1, seed=seed).thinking_delay()
        assert 0.5 <= fast < 1.5
        assert 2.3 <= slow < 3.3
    assert DecisionEngine(1, seed=0, config=_instant_config()).thinking_delay() == 0.0


def test_same_seed_same_decisions(empty_board):
    """Same seed gives the same decisions."""
    a = DecisionEngine(4, seed=123)
    b = DecisionEngine(4, seed=123)
    assert a.style == b.style
    assert [a.decide(empty_board) for _ in range(10)] == [b.decide(empty_board) for _ in range(10)]


def test_best_move(ai_win_board, forced_block_board, empty_board):
    """Best move takes wins, then blocks, then searches."""
    engine = new_engine(1, seed=0)
    assert engine.best_move(ai_win_board) == 3
    assert engine.best_move(forced_block_board) == 0
    # every column scores 0 here; ties go to the leftmost
    assert engine.best_move(empty_board) == 0


def test_coaching_hint(ai_win_board, forced_block_board, empty_board):
    """Test coaching hint."""
    engine = new_engine(5, seed=0)

    hint = engine.coaching_hint(forced_block_board)
    assert hint.column == 0
    assert "win" in hint.reason

    hint = engine.coaching_hint(ai_win_board)
    assert hint.column == 3
    assert "Block" in hint.reason

    hint = engine.coaching_hint(empty_board)
    assert hint.column == 3


def test_act_uses_move_count(empty_board):
    """act() plays a legal column without turn bookkeeping."""
    engine = DecisionEngine(5, seed=0, style=PlayStyle.AGGRESSIVE)
    assert engine.side is Side.AI
    assert engine.act(empty_board) in range(7)


@pytest.mark.parametrize(
    "rating,expected",
    [(0, 1), (15, 1), (16, 2), (45, 2), (46, 3), (90, 3), (91, 5), (150, 5),
     (151, 7), (225, 7), (226, 8), (300, 8), (301, 9), (400, 9), (401, 10), (5000, 10)],
)
def test_difficulty_from_rating(rating, expected):
    """Ratings map onto difficulty levels."""
    assert resolve_difficulty(SkillRating(rating)) == expected
    assert DecisionEngine(SkillRating(rating), seed=0).difficulty == expected


def test_practice_tiers():
    """Named tiers map onto difficulty levels."""
    assert [DecisionEngine(t, seed=0).difficulty for t in DifficultyTier] == [1, 4, 7, 10]


@pytest.mark.parametrize("source", [0, 11, -3, True, "hard", 5.5])
def test_invalid_difficulty(source):
    """Unknown difficulty sources raise ValueError."""
    with pytest.raises(ValueError):
        DecisionEngine(source)


def test_noob_spreads_its_moves():
    """Lowest tier falls back to random columns instead of a greedy pick."""
    board = Board.from_strings(["......."] * 5 + ["...X..."])
    columns = set()
    for seed in range(200):
        engine = DecisionEngine(DifficultyTier.NOOB, seed=seed)
        columns.add(engine.decide(board))
        assert engine.last_decision.step == "fallback"
    assert len(columns) >= 5
