"""Error hierarchy and structured error reporting helpers."""

from .handling import classify_error, log_error
from .internal import (
    ConfigError,
    InternalError,
    LogReadError,
    ModeCardinalityError,
    ParsingError,
)

__all__ = [
    "ConfigError",
    "InternalError",
    "LogReadError",
    "ModeCardinalityError",
    "ParsingError",
    "classify_error",
    "log_error",
]
