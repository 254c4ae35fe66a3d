"""Structured logging configuration for subgraph collection runs."""

from __future__ import annotations

import logging
import sys

from venus_tags.utils.config import LOGS_DIR

# Log file path
LOG_FILE = LOGS_DIR / "venus_tags.log"


class PerformanceLogger:
    """Logger with run metrics tracking."""

    def __init__(self, name: str) -> None:
        """
        Initialize performance logger.

        Args:
            name: Logger name (usually module name)
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG)

        # Prevent duplicate handlers
        if not self.logger.handlers:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(logging.INFO)
            console_formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
            console_handler.setFormatter(console_formatter)
            self.logger.addHandler(console_handler)

            LOGS_DIR.mkdir(exist_ok=True)
            file_handler = logging.FileHandler(LOG_FILE, encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
            file_handler.setFormatter(file_formatter)
            self.logger.addHandler(file_handler)

        # Run metrics
        self.metrics: dict[str, float] = {}

    def debug(self, message: str, *args: object, **kwargs: object) -> None:
        """Log debug message."""
        self.logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: object, **kwargs: object) -> None:
        """Log info message."""
        self.logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: object, **kwargs: object) -> None:
        """Log warning message."""
        self.logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: object, **kwargs: object) -> None:
        """Log error message."""
        self.logger.error(message, *args, **kwargs)

    def exception(self, message: str, *args: object, **kwargs: object) -> None:
        """Log exception with traceback."""
        self.logger.exception(message, *args, **kwargs)

    def record_metric(self, name: str, value: float) -> None:
        """
        Record a run metric.

        Args:
            name: Metric name (e.g., "pages_fetched", "tags_accepted")
            value: Metric value
        """
        self.metrics[name] = value
        self.debug(f"Metric {name}: {value:.2f}")

    def log_progress(self, page: int, fetched: int, accepted: int) -> None:
        """
        Log progress after a page has been processed.

        Args:
            page: Number of pages fetched so far
            fetched: Markets received so far
            accepted: Tags produced so far
        """
        self.info(f"Page {page}: {fetched} markets fetched, {accepted} tags accepted")

    def log_summary(self) -> None:
        """Log summary of all recorded metrics."""
        if not self.metrics:
            return

        self.info("=== Collection Summary ===")
        for name, value in self.metrics.items():
            self.info(f"{name}: {value:.2f}")
        self.info("==========================")


def get_logger(name: str) -> PerformanceLogger:
    """
    Get or create a logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        PerformanceLogger instance
    """
    return PerformanceLogger(name)
