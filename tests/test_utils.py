"""Tests for utilities."""

from __future__ import annotations

import csv

from connect4_ai.utils import MetricsLogger


def _read_rows(path):
    with open(path, newline="") as f:
        return list(csv.DictReader(f))


def test_metrics_logger(tmp_path):
    """Test metrics logger."""
    with MetricsLogger(log_dir=str(tmp_path), prefix="test") as logger:
        logger.log("block_rate", 0.5)
        logger.log("block_rate", 0.75)
        logger.log_dict({"block_rate": 0.9, "expected": 0.95}, step=7)

        assert logger.get_metric("block_rate") == [(0, 0.5), (1, 0.75), (7, 0.9)]
        assert logger.get_metric("expected") == [(7, 0.95)]
        assert logger.get_metric("missing") == []
        path = logger.csv_path

    assert logger.csv_file.closed
    rows = _read_rows(path)
    assert [row["step"] for row in rows] == ["0", "1", "7"]
    assert rows[2]["expected"] == "0.95"
    assert rows[0]["expected"] == ""


def test_metrics_logger_appends_known_fields(tmp_path):
    """Rows with known fields are appended."""
    logger = MetricsLogger(log_dir=str(tmp_path))
    logger.log_dict({"wins": 1, "draws": 0}, step=0)
    logger.log_dict({"wins": 3, "draws": 1}, step=1)
    logger.close()

    rows = _read_rows(logger.csv_path)
    assert [(row["wins"], row["draws"]) for row in rows] == [("1", "0"), ("3", "1")]


def test_metrics_logger_merges_same_step(tmp_path):
    """Values logged for an existing step update that step's row."""
    with MetricsLogger(log_dir=str(tmp_path)) as logger:
        logger.log_dict({"wins": 1, "draws": 0}, step=0)
        logger.log_dict({"wins": 2}, step=0)
        logger.log_dict({"wins": 5, "draws": 1}, step=1)

    rows = _read_rows(logger.csv_path)
    assert [(row["step"], row["wins"], row["draws"]) for row in rows] == [
        ("0", "2", "0"),
        ("1", "5", "1"),
    ]
