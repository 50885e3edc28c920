"""Per-line context handed to the classifier by its caller."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, slots=True)
class LineContext:
    """Date the line was logged under and its 1-based position in the file."""

    date: date
    line_number: int

    def timestamp(self, time_of_day: str) -> str:
        return f"{self.date.isoformat()} {time_of_day}"


@dataclass(frozen=True, slots=True)
class NormalizedLine:
    text: str
    context: LineContext

    @classmethod
    def of(cls, text: str, log_date: date, line_number: int = 1) -> NormalizedLine:
        return cls(text, LineContext(log_date, line_number))

    @property
    def line_number(self) -> int:
        return self.context.line_number
