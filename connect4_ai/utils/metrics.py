"""Metrics logging utilities."""

from collections import defaultdict
from typing import Dict, List, Optional
import csv
import os
from datetime import datetime


class MetricsLogger:
    """CSV logger for calibration and match metrics."""

    def __init__(self, log_dir: str = "data/logs", prefix: str = "metrics"):
        """
        Initialize metrics logger.

        Args:
            log_dir: Directory to save logs
            prefix: File name prefix of the CSV file
        """
        self.log_dir = log_dir
        os.makedirs(log_dir, exist_ok=True)

        self.metrics = defaultdict(list)
        self.rows: Dict[int, Dict[str, float]] = {}
        self.fieldnames = ["step"]

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.csv_path = os.path.join(log_dir, f"{prefix}_{timestamp}.csv")
        self.csv_file = open(self.csv_path, "w", newline="")
        self.csv_writer = csv.DictWriter(self.csv_file, fieldnames=self.fieldnames)
        self.csv_writer.writeheader()

    def log(self, key: str, value: float, step: Optional[int] = None) -> None:
        """
        Log a metric value.

        Args:
            key: Metric name
            value: Metric value
            step: Step number (defaults to the number of values already logged for ``key``)
        """
        self.log_dict({key: value}, step=step if step is not None else len(self.metrics[key]))

    def log_dict(self, metrics_dict: Dict[str, float], step: int) -> None:
        """
        Log multiple metrics for one step.

        Args:
            metrics_dict: Dictionary of metric names to values
            step: Step number (e.g. difficulty tier or game index)
        """
        new_fields = [key for key in metrics_dict if key not in self.fieldnames]
        known_step = step in self.rows
        for key, value in metrics_dict.items():
            self.metrics[key].append((step, value))
        self.rows.setdefault(step, {}).update(metrics_dict)

        if new_fields or known_step:
            # Header or an earlier row changed: rewrite the whole file from memory
            self.fieldnames.extend(new_fields)
            self._rewrite()
        else:
            self.csv_writer.writerow({"step": step, **metrics_dict})
            self.csv_file.flush()

    def _rewrite(self) -> None:
        self.csv_file.close()
        self.csv_file = open(self.csv_path, "w", newline="")
        self.csv_writer = csv.DictWriter(self.csv_file, fieldnames=self.fieldnames)
        self.csv_writer.writeheader()
        for step in sorted(self.rows):
            self.csv_writer.writerow({"step": step, **self.rows[step]})
        self.csv_file.flush()

    def get_metric(self, key: str) -> List[tuple]:
        """
        Get all logged values for a metric.

        Args:
            key: Metric name

        Returns:
            List of (step, value) tuples
        """
        return self.metrics.get(key, [])

    def close(self) -> None:
        """Close the CSV file."""
        if self.csv_file and not self.csv_file.closed:
            self.csv_file.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
