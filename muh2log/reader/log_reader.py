"""Single-file reader feeding normalized lines to the classifier."""

from __future__ import annotations

import logging
import os
from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

from ..config import ParserSettings
from ..errors import LogReadError
from ..events import EventKind, EventSink
from ..logs import logger
from ..parser import LineClassifier, LineContext, NormalizedLine
from .normalizer import date_from_filename, decode_line, normalize_line


@dataclass
class ParseStats:
    """Counters collected while parsing one file."""

    lines: int = 0
    unrecognized: int = 0
    anomalies: int = 0
    events: Counter[EventKind] = field(default_factory=Counter)

    @property
    def total_events(self) -> int:
        return sum(self.events.values())


class LogReader:
    """Reads one muh2 log file line by line, in file order."""

    def __init__(
        self, settings: ParserSettings, classifier: LineClassifier | None = None
    ) -> None:
        self.settings = settings
        self.classifier = classifier or LineClassifier()

    def resolve_date(self, path: str | os.PathLike[str]) -> date:
        """Return the configured date, or the one embedded in the filename.

        Raises:
            LogReadError: Neither source provides a date.
        """
        if self.settings.log_date is not None:
            return self.settings.log_date
        found = date_from_filename(Path(path))
        if found is None:
            raise LogReadError(
                f"No date configured and none found in filename {Path(path).name}",
                data={"path": str(path)},
            )
        logger.log_event(
            "reader", "date_from_filename", level=logging.DEBUG, log_date=found
        )
        return found

    def iter_lines(
        self, path: str | os.PathLike[str], log_date: date | None = None
    ) -> Iterator[NormalizedLine]:
        """Yield every line of ``path`` normalized, numbered from 1.

        Raises:
            LogReadError: The file cannot be opened or read.
        """
        log_date = log_date or self.resolve_date(path)
        source = Path(path).name
        try:
            with open(path, "rb") as f:
                for number, raw in enumerate(f, 1):
                    text, fell_back = decode_line(
                        raw, self.settings.encoding, self.settings.fallback_encoding
                    )
                    if fell_back:
                        logger.log_event(
                            "reader",
                            "decode_fallback",
                            level=logging.DEBUG,
                            source=source,
                            line_number=number,
                            encoding=self.settings.fallback_encoding,
                        )
                    yield NormalizedLine(
                        normalize_line(text, self.settings.max_line_length),
                        LineContext(log_date, number),
                    )
        except OSError as e:
            raise LogReadError(
                f"Cannot read log file {path}", data={"path": str(path)}
            ) from e

    def parse_file(self, path: str | os.PathLike[str], sink: EventSink) -> ParseStats:
        """Classify every line of ``path`` into ``sink`` and return the counters."""
        log_date = self.resolve_date(path)
        source = Path(path).name
        stats = ParseStats()
        logger.log_event("reader", "file_open", path=str(path), log_date=log_date)
        for line in self.iter_lines(path, log_date):
            stats.lines += 1
            result = self.classifier.feed(line, sink, source=source)
            stats.events.update(event.kind for event in result.events)
            if result.diagnostics:
                if result.recognized:
                    stats.anomalies += 1
                else:
                    stats.unrecognized += 1
        logger.log_event(
            "reader",
            "file_done",
            source=source,
            lines=stats.lines,
            unrecognized=stats.unrecognized,
            anomalies=stats.anomalies,
        )
        return stats
