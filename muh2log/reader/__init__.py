"""Reading and normalizing muh2 log files."""

from .log_reader import LogReader, ParseStats
from .normalizer import date_from_filename, decode_line, normalize_line

__all__ = [
    "LogReader",
    "ParseStats",
    "date_from_filename",
    "decode_line",
    "normalize_line",
]
