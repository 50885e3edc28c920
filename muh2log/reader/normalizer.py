"""Raw log line normalization applied before classification."""

from __future__ import annotations

import re
from datetime import date
from pathlib import PurePath

# mIRC color codes: Ctrl+C followed by 1-2 digits, optionally comma and 1-2 more
MIRC_COLOR_PATTERN = re.compile(r"\x03(?:\d{1,2}(?:,\d{1,2})?)?")
# Every other C0 control character except tab, plus DEL
CONTROL_PATTERN = re.compile(r"[\x00-\x08\x0a-\x1f\x7f]")
WHITESPACE_PATTERN = re.compile(r"\s+")
FILENAME_DATE_PATTERN = re.compile(r"(?<!\d)(\d{4})-?(\d{2})-?(\d{2})(?!\d)")


def decode_line(raw: bytes, encoding: str, fallback_encoding: str) -> tuple[str, bool]:
    """Decode raw bytes, returning the text and whether the fallback was needed."""
    try:
        return raw.decode(encoding), False
    except UnicodeDecodeError:
        return raw.decode(fallback_encoding, errors="replace"), True


def normalize_line(text: str, max_length: int | None = None) -> str:
    """Strip formatting and control codes, collapse whitespace and trim."""
    text = MIRC_COLOR_PATTERN.sub("", text)
    text = CONTROL_PATTERN.sub("", text)
    text = WHITESPACE_PATTERN.sub(" ", text).strip()
    if max_length is not None and len(text) > max_length:
        text = text[:max_length].rstrip()
    return text


def date_from_filename(path: str | PurePath) -> date | None:
    """Extract a ``YYYYMMDD`` or ``YYYY-MM-DD`` date from a log filename.

    Only the final path component is inspected; impossible dates are ignored.
    """
    for m in FILENAME_DATE_PATTERN.finditer(PurePath(path).name):
        try:
            return date(int(m[1]), int(m[2]), int(m[3]))
        except ValueError:
            continue
    return None
