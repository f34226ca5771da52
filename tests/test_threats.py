"""Tests for threat detection and ranking."""

from __future__ import annotations

from connect4_ai.agents.connect4 import (
    ThreatRecord,
    column_threat,
    find_winning_move,
    rank_threats,
    top_threat,
)
from connect4_ai.games.connect4 import Board, Side


def test_find_winning_move(ai_win_board, forced_block_board):
    """Test find winning move."""
    assert find_winning_move(ai_win_board, Side.AI) == 3
    assert find_winning_move(ai_win_board, Side.PLAYER) is None
    # leftmost of the two completing columns
    assert find_winning_move(forced_block_board, Side.PLAYER) == 0


def test_column_threat_severities(forced_block_board):
    """Threats are graded by how many opponent pieces a window holds."""
    assert column_threat(forced_block_board, 0) == 100
    assert column_threat(forced_block_board, 4) == 100
    assert column_threat(forced_block_board, 5) == 50
    assert column_threat(forced_block_board, 6) == 10


def test_column_threat_ignores_windows_with_own_piece():
    """Windows we already occupy are not threats."""
    open_two = Board.from_strings(["......."] * 5 + ["XX....."])
    assert column_threat(open_two, 3) == 50

    # The same two X already share their window with an O
    blocked = Board.from_strings(["......."] * 5 + ["XXO...."])
    assert column_threat(blocked, 3) == 0


def test_rank_threats_orders_by_severity(forced_block_board):
    """Most severe threat comes first."""
    ranked = rank_threats(forced_block_board)
    assert [r.column for r in ranked[:3]] == [0, 4, 5]
    severities = [r.severity for r in ranked]
    assert severities == sorted(severities, reverse=True)
    assert top_threat(forced_block_board) == ThreatRecord(column=0, severity=100)


def test_no_threats_on_empty_board(empty_board):
    """Test no threats on empty board."""
    assert rank_threats(empty_board) == []
    assert top_threat(empty_board) is None
