"""Centralized internal error hierarchy.

These exceptions give semantic categories to the failures the reader,
config layer and classifier can hit. The classifier never lets them escape
its public contract; the reader and CLI surface them to the caller.

Classes:
  InternalError        – Base for all internal errors.
  ConfigError          – Invalid or unreadable settings.
  LogReadError         – A log file could not be read or dated.
  ParsingError         – A line matched a grammar but its payload is malformed.
  ModeCardinalityError – Mode letters and target nicks disagree in count.
"""

from __future__ import annotations

from collections.abc import Mapping


class InternalError(Exception):
    """Base class for all internal application errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class ConfigError(InternalError):
    """Exception raised when settings cannot be loaded or fail validation."""


class LogReadError(InternalError):
    """Exception raised when a log file cannot be opened or has no known date."""


class ParsingError(InternalError):
    """Exception raised when a recognised line carries a malformed payload."""


class ModeCardinalityError(ParsingError):
    """Raised when a mode string and its target list disagree in length.

    ``data`` carries ``modes``, ``targets``, ``letters`` (number of mode
    letters) and ``decoded`` (number of changes emitted before the failure).
    """

    @property
    def letters(self) -> int:
        return int(self.data.get("letters", 0))

    @property
    def decoded(self) -> int:
        return int(self.data.get("decoded", 0))


__all__ = [
    "InternalError",
    "ConfigError",
    "LogReadError",
    "ParsingError",
    "ModeCardinalityError",
]
