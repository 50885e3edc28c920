"""
Configuration constants for the muh2 log parser

This module contains the tunable constants used by the reader and classifier.
Each constant can be overridden by setting an environment variable with the same name.
"""

import os


def _get_env_int(name: str, default: int) -> int:
    """Retrieve an integer value from an environment variable.

    Attempts to parse the environment variable as an integer. If the variable
    is not set or cannot be parsed, logs a warning and returns the default value.

    Args:
        name: The name of the environment variable to read.
        default: The default integer value to return if parsing fails.

    Returns:
        The parsed integer value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            print(
                f"Warning: Invalid integer value for {name}='{value}', using default {default}"
            )
    return default


def _get_env_str(name: str, default: str) -> str:
    """Retrieve a non-empty string value from an environment variable.

    Blank values are treated as unset.
    """
    value = os.getenv(name)
    if value is not None and value.strip():
        return value.strip()
    return default


# Encodings tried when decoding raw log bytes; read when settings are built
ENCODING_ENV = "MUH2LOG_ENCODING"
FALLBACK_ENCODING_ENV = "MUH2LOG_FALLBACK_ENCODING"
DEFAULT_ENCODING = "utf-8"
DEFAULT_FALLBACK_ENCODING = "latin-1"  # Used when a line is not valid in the primary encoding

# Normalization limits
MAX_LINE_LENGTH = _get_env_int(
    "MUH2LOG_MAX_LINE_LENGTH", 4096
)  # Longer normalized lines are truncated

# Config file looked up when no --config is given
CONFIG_FILE_ENV = "MUH2LOG_CONF_FILE"
