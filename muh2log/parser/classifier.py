"""Line classifier turning normalized muh2 lines into chat events."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from ..errors import ParsingError
from ..events import ChatEvent, EventSink, dispatch_event
from ..logging_config import log_structured_error
from ..logs import logger
from .context import NormalizedLine
from .grammar import GRAMMARS, Grammar


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A notice about a line that did not classify cleanly."""

    level: int
    line_number: int
    text: str
    message: str


@dataclass(frozen=True, slots=True)
class Classification:
    events: tuple[ChatEvent, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()
    grammar: str | None = None

    @property
    def recognized(self) -> bool:
        return self.grammar is not None


class LineClassifier:
    """Matches a line against an ordered grammar table; first full match wins.

    The classifier holds no per-line state, so one instance can be shared
    across files and threads as long as each line carries its own context.
    """

    def __init__(self, grammars: Sequence[Grammar] = GRAMMARS) -> None:
        self.grammars = tuple(grammars)

    def classify(self, line: NormalizedLine) -> Classification:
        """Classify one line. Never raises for malformed input.

        Empty lines yield an empty Classification. Non-empty lines matching
        no grammar yield a single DEBUG diagnostic. A grammar whose payload
        turns out malformed keeps the events built before the fault and
        adds a WARNING diagnostic.
        """
        text = line.text
        for grammar in self.grammars:
            m = grammar.match(text)
            if m is None:
                continue
            events: list[ChatEvent] = []
            ts = line.context.timestamp(m["time"])
            try:
                grammar.build(m, ts, events)
            except ParsingError as e:
                return Classification(
                    tuple(events),
                    (Diagnostic(logging.WARNING, line.line_number, text, str(e)),),
                    grammar.name,
                )
            return Classification(tuple(events), (), grammar.name)

        if not text:
            return Classification()
        notice = f"unrecognized line #{line.line_number}: '{text}'"
        return Classification(
            diagnostics=(Diagnostic(logging.DEBUG, line.line_number, text, notice),)
        )

    def feed(
        self, line: NormalizedLine, sink: EventSink, *, source: str | None = None
    ) -> Classification:
        """Classify ``line``, hand its events to ``sink`` in order and report diagnostics."""
        result = self.classify(line)
        for event in result.events:
            dispatch_event(sink, event)
        for diagnostic in result.diagnostics:
            self._report(diagnostic, result.grammar, source)
        return result

    @staticmethod
    def _report(diagnostic: Diagnostic, grammar: str | None, source: str | None) -> None:
        if grammar is None:
            logger.log_event(
                "parser",
                "unrecognized_line",
                level=diagnostic.level,
                source=source,
                line_number=diagnostic.line_number,
                text=diagnostic.text,
            )
            return
        log_structured_error(
            "parsing",
            f"{grammar} line #{diagnostic.line_number}: {diagnostic.message}",
            context={"source": source, "text": diagnostic.text},
            level=diagnostic.level,
        )
