"""Tests for the match controller and batch play."""

from __future__ import annotations

import asyncio

import pytest

from connect4_ai.agents import DecisionEngine, RandomAgent
from connect4_ai.config import EngineConfig, ThinkingConfig
from connect4_ai.games.connect4 import ColumnFullError, GameStatus, Side, drop
from connect4_ai.utils import Match, play_match


def _engine(difficulty: int = 5, scale: float = 0.0, **kwargs) -> DecisionEngine:
    config = EngineConfig(thinking=ThinkingConfig(scale=scale))
    return DecisionEngine(difficulty, seed=0, config=config, **kwargs)


def test_turns_alternate():
    """Human and engine alternate turns."""
    match = Match(_engine())
    match.human_turn(3)
    assert match.to_move is Side.AI
    with pytest.raises(ValueError):
        match.human_turn(2)

    column = asyncio.run(match.ai_turn())
    assert column is not None
    assert match.board.move_count() == 2
    assert match.history == [(Side.PLAYER, 3), (Side.AI, column)]
    assert match.to_move is Side.PLAYER


def test_ai_turn_out_of_order():
    """Engine cannot move on the human's turn."""
    match = Match(_engine())
    with pytest.raises(ValueError):
        asyncio.run(match.ai_turn())


def test_engine_may_move_first():
    """Test engine may move first."""
    match = Match(_engine(), human_first=False)
    assert asyncio.run(match.ai_turn()) is not None
    assert match.to_move is Side.PLAYER


def test_human_move_reaches_profiler():
    """Human moves are passed on to the profiler."""
    match = Match(_engine(difficulty=6))
    match.human_turn(4)
    asyncio.run(match.ai_turn())
    assert match.engine.opponent_moves == [4]


def test_illegal_human_move():
    """A full column is rejected for the human."""
    match = Match(_engine())
    board = match.board
    for i in range(6):
        board = drop(board, 0, Side.PLAYER if i % 2 == 0 else Side.AI)
    match.board = board
    with pytest.raises(ColumnFullError):
        match.human_turn(0)


def test_forfeit_during_thinking_discards_move():
    """Move chosen after a forfeit is dropped."""
    async def scenario(match: Match):
        task = asyncio.create_task(match.ai_turn())
        await asyncio.sleep(0)
        match.forfeit(Side.PLAYER)
        return await task

    match = Match(_engine(scale=0.01))
    match.human_turn(3)
    assert asyncio.run(scenario(match)) is None
    assert match.board.move_count() == 1
    assert match.is_over
    assert match.winner is Side.AI


def test_win_ends_match(ai_win_board):
    """Test win ends match."""
    # below difficulty 3 the first move never comes from the opening book
    match = Match(_engine(difficulty=2), board=ai_win_board, human_first=False)
    assert asyncio.run(match.ai_turn()) == 3
    assert match.outcome.status is GameStatus.WIN
    assert match.winner is Side.AI
    with pytest.raises(ValueError):
        match.human_turn(4)


def test_no_move_ends_in_draw():
    """Engine with no legal move ends the match in a draw."""
    match = Match(_engine(policy=()), human_first=False)
    assert asyncio.run(match.ai_turn()) is None
    assert match.outcome.status is GameStatus.DRAW
    assert match.is_over


def test_play_match():
    """Test play match."""
    config = EngineConfig(thinking=ThinkingConfig(scale=0.0))
    results = play_match(
        lambda seed: DecisionEngine(7, seed=seed, config=config),
        RandomAgent(seed=0),
        num_games=3,
        seed=42,
        randomize_first_player=True,
    )
    assert results.games == 3
    assert sum(results.steps.values()) > 0
    assert set(results.steps) <= {
        "opening", "immediate_win", "block", "threat_block", "trap",
        "favored_counter", "strategic", "fallback",
    }
