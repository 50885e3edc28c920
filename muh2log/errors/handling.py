from __future__ import annotations

from ..logging_config import log_structured_error
from .internal import (
    ConfigError,
    InternalError,
    LogReadError,
    ParsingError,
)


def classify_error(error: Exception) -> str:
    """Map an exception onto the error type used for aggregation."""
    if isinstance(error, ParsingError):
        return "parsing"
    if isinstance(error, ConfigError):
        return "config"
    if isinstance(error, LogReadError | OSError):
        return "io"
    if isinstance(error, InternalError):
        return "internal"
    return "unknown"


def log_error(message: str, error: Exception, context: dict = None) -> None:
    """Logs an error message with the associated exception details.

    The exception's ``data`` mapping (for internal errors) is merged into the
    logged context so structured details are not lost.

    Args:
        message: A descriptive message about the error context.
        error: The exception instance to be logged.
        context: Optional additional context data for debugging.
    """
    merged: dict = {}
    if isinstance(error, InternalError):
        merged.update(error.data)
    if context:
        merged.update(context)

    log_structured_error(
        error_type=classify_error(error),
        message=f"{message}: {str(error)}",
        exception=error,
        context=merged or None,
    )
