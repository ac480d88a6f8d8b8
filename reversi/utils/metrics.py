"""Metrics logging utilities."""

from collections import defaultdict
from typing import Dict, List, Optional
import csv
import os
from datetime import datetime


class MetricsLogger:
    """CSV logger for per-game match metrics."""

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
        self.rows: List[Dict[str, object]] = []
        self.current_step = 0

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.csv_path = os.path.join(log_dir, f"{prefix}_{timestamp}.csv")
        self.csv_file = open(self.csv_path, "w", newline="")
        self.csv_fieldnames = ["step"]
        self.csv_writer = csv.DictWriter(self.csv_file, fieldnames=self.csv_fieldnames)
        self.csv_writer.writeheader()

    def log(self, key: str, value: float, step: Optional[int] = None) -> None:
        """Log a single metric value."""
        self.log_dict({key: value}, step=step)

    def log_dict(self, metrics_dict: Dict[str, float], step: Optional[int] = None) -> None:
        """
        Log multiple metrics as one CSV row.

        Args:
            metrics_dict: Dictionary of metric names to values
            step: Step/game number (uses current_step if None)
        """
        if step is None:
            step = self.current_step

        new_fields = [key for key in metrics_dict if key not in self.csv_fieldnames]
        row = {"step": step, **metrics_dict}
        self.rows.append(row)

        if new_fields:
            # Header changed: rewrite the whole file
            self.csv_fieldnames.extend(new_fields)
            self.csv_file.close()
            self.csv_file = open(self.csv_path, "w", newline="")
            self.csv_writer = csv.DictWriter(self.csv_file, fieldnames=self.csv_fieldnames)
            self.csv_writer.writeheader()
            for past in self.rows:
                self.csv_writer.writerow({name: past.get(name) for name in self.csv_fieldnames})
        else:
            self.csv_writer.writerow({name: row.get(name) for name in self.csv_fieldnames})
        self.csv_file.flush()

        for key, value in metrics_dict.items():
            self.metrics[key].append((step, value))

    def increment_step(self) -> None:
        self.current_step += 1

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
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
