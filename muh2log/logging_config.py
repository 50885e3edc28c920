r"""
Logging configuration module for the muh2 log parser.

Provides a clean, configurable logging setup using colorlog library with
structured error logging and aggregation capabilities.
"""

import atexit
import logging
import os
import sys
import threading
import time
from collections import defaultdict
from typing import Any

import colorlog

MAX_ERRORS_PER_TYPE = 1000


class ErrorAggregator:
    """Aggregates and reports error patterns seen while parsing.

    Tracks error frequencies per error type so a run over a large log can end
    with a short summary instead of thousands of repeated warnings.
    """

    def __init__(self):
        self.errors: dict[str, list[dict[str, Any]]] = defaultdict(list)
        self.lock = threading.Lock()

    def record_error(self, error_type: str, message: str, context: dict[str, Any] = None) -> None:
        """Record an error occurrence with context."""
        with self.lock:
            error_entry = {
                "timestamp": time.time(),
                "message": message,
                "context": context or {},
            }
            self.errors[error_type].append(error_entry)

            if len(self.errors[error_type]) > MAX_ERRORS_PER_TYPE:
                self.errors[error_type] = self.errors[error_type][-MAX_ERRORS_PER_TYPE:]

    def get_error_summary(self) -> dict[str, Any]:
        """Get a summary of error patterns."""
        with self.lock:
            summary = {}
            for error_type, occurrences in self.errors.items():
                summary[error_type] = {
                    "total_count": len(occurrences),
                    "last_occurrence": occurrences[-1] if occurrences else None,
                }
            return summary

    def reset(self) -> None:
        with self.lock:
            self.errors.clear()

    def log_summary_report(self) -> None:
        """Log a summary report of error patterns."""
        summary = self.get_error_summary()
        if not summary:
            logging.info("No errors recorded in current session")
            return

        logging.warning("ERROR SUMMARY REPORT")
        for error_type, stats in summary.items():
            logging.warning(f"  {error_type}: {stats['total_count']} total")
            if stats["last_occurrence"]:
                logging.warning(f"    Last: {stats['last_occurrence']['message']}")


# Global error aggregator instance
error_aggregator = ErrorAggregator()


def log_structured_error(
    error_type: str,
    message: str,
    exception: Exception = None,
    context: dict[str, Any] = None,
    level: int = logging.ERROR
) -> None:
    """Log an error with structured context and aggregation.

    Args:
        error_type: Category of the error (e.g., 'parsing', 'config', 'io')
        message: Descriptive error message
        exception: The exception that occurred (optional)
        context: Additional context data for debugging
        level: Logging level (default: ERROR)
    """
    structured_message = f"[{error_type.upper()}] {message}"

    if exception:
        structured_message += f" | Exception: {type(exception).__name__}: {str(exception)}"

    if context:
        context_str = " | ".join(f"{k}={v}" for k, v in context.items())
        structured_message += f" | Context: {context_str}"

    logging.log(level, structured_message)

    error_aggregator.record_error(error_type, message, context)


class LoggerConfigurator:
    """Handles logging configuration cleanly using colorlog.

    Supports environment variable configuration for log levels.
    """

    def __init__(self, config=None):
        """Initialize the configurator.

        Args:
            config: Optional config dict; ``debug`` forces DEBUG level.
        """
        self.config = config or {}

    def resolve_level(self) -> int:
        if self.config.get("debug"):
            return logging.DEBUG
        debug_env = os.environ.get("DEBUG", "").lower()
        return logging.DEBUG if debug_env in ("true", "1", "yes") else logging.INFO

    def build_formatter(self) -> colorlog.ColoredFormatter:
        return colorlog.ColoredFormatter(
            "%(asctime)s %(log_color)s%(levelname)-8s%(reset)s %(message_log_color)s%(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "magenta",
            },
            secondary_log_colors={
                "message": {
                    "ERROR": "red",
                    "CRITICAL": "magenta",
                }
            },
            reset=True,
        )

    def configure(self):
        """Configure logging with colored output using colorlog.

        Uses environment variables:
        - DEBUG: Set to 'true', '1', or 'yes' for DEBUG level, otherwise INFO
        """
        log_level = self.resolve_level()
        formatter = self.build_formatter()

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)

        logging.basicConfig(
            level=log_level,
            handlers=[handler],
            format="%(message)s",
        )

        root_logger = logging.getLogger()
        root_logger.setLevel(log_level)

        # Apply formatter to all existing handlers (in case any were added)
        for h in root_logger.handlers:
            h.setFormatter(formatter)

        atexit.register(self._log_final_error_summary)
        return log_level

    def _log_final_error_summary(self):
        """Log final error summary on application exit."""
        try:
            error_aggregator.log_summary_report()
        except Exception as e:
            logging.error(f"Failed to log final error summary: {e}")
