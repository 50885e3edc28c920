"""Ordered grammar table for muh2 log lines.

+------------+-----------------------------------------------+------------------------------------+
| Line       | Format                                        | Notes                              |
+------------+-----------------------------------------------+------------------------------------+
| Normal     | <NICK> MSG                                    | Empty messages never match.        |
| Join       | *** Joins: NICK (HOST)                        | Leading "~" on HOST is dropped.    |
| Quit       | *** Quits: NICK (HOST) (MSG)                  | MSG may be empty.                  |
| Mode       | *** NICK sets mode: +o-v NICK NICK            | Only ops (o) and voices (v).       |
| Action     | * NICK MSG                                    | Empty actions never match.         |
| Slap       | * NICK slaps [NICK [MSG]]                     | Target is optional.                |
| Nickchange | *** NICK is now known as NICK                 |                                    |
| Part       | *** Parts: NICK (HOST)                        |                                    |
| Topic      | *** NICK changes topic to 'MSG'               | Empty topics never match.          |
| Kick       | *** NICK was kicked by NICK (MSG)             | MSG may be empty.                  |
+------------+-----------------------------------------------+------------------------------------+

Every line starts with ``[HH:MM]`` or ``[HH:MM:SS]``; seconds are dropped.
Nicks can't contain ":" or whitespace, so at most one grammar matches a line
and the order below only favours the most frequent line types.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from ..events import (
    ActionEvent,
    ChatEvent,
    EventKind,
    JoinEvent,
    KickEvent,
    ModeEvent,
    NickchangeEvent,
    NormalEvent,
    PartEvent,
    QuitEvent,
    SlapEvent,
    TopicEvent,
)
from .modes import iter_mode_changes

TIME_PREFIX = r"\[(?P<time>\d{2}:\d{2})(?::\d{2})?\] "

# ASCII only: no Unicode digits in times, no case folds like "ſ" in "slaps"
SLAP_PATTERN = re.compile(
    r"slaps(?: (?P<target>\S+)(?: .+)?)?", re.IGNORECASE | re.ASCII
)

# Builders append to ``out`` so events emitted before a ParsingError survive it.
Builder = Callable[[re.Match[str], str, list[ChatEvent]], None]


@dataclass(frozen=True, slots=True)
class Grammar:
    """One line shape: a pattern matched against the whole line plus its builder."""

    name: str
    kind: EventKind
    pattern: re.Pattern[str]
    build: Builder

    def match(self, text: str) -> re.Match[str] | None:
        return self.pattern.fullmatch(text)


def _compile(body: str) -> re.Pattern[str]:
    return re.compile(TIME_PREFIX + body, re.ASCII)


def _build_normal(m: re.Match[str], ts: str, out: list[ChatEvent]) -> None:
    out.append(NormalEvent(ts, m["nick"], m["message"]))


def _build_join(m: re.Match[str], ts: str, out: list[ChatEvent]) -> None:
    out.append(JoinEvent(ts, m["nick"], m["host"]))


def _build_quit(m: re.Match[str], ts: str, out: list[ChatEvent]) -> None:
    out.append(QuitEvent(ts, m["nick"], m["host"]))


def _build_mode(m: re.Match[str], ts: str, out: list[ChatEvent]) -> None:
    for change in iter_mode_changes(m["modes"], m["targets"].split(" ")):
        out.append(ModeEvent(ts, m["nick"], change.target, change.mode))


def _build_action(m: re.Match[str], ts: str, out: list[ChatEvent]) -> None:
    rest = m["rest"]
    slap = SLAP_PATTERN.fullmatch(rest)
    if slap:
        out.append(SlapEvent(ts, m["nick"], slap["target"] or None))
    out.append(ActionEvent(ts, m["nick"], rest))


def _build_nickchange(m: re.Match[str], ts: str, out: list[ChatEvent]) -> None:
    out.append(NickchangeEvent(ts, m["nick"], m["new_nick"]))


def _build_part(m: re.Match[str], ts: str, out: list[ChatEvent]) -> None:
    out.append(PartEvent(ts, m["nick"], m["host"]))


def _build_topic(m: re.Match[str], ts: str, out: list[ChatEvent]) -> None:
    out.append(TopicEvent(ts, m["nick"], m["topic"]))


def _build_kick(m: re.Match[str], ts: str, out: list[ChatEvent]) -> None:
    out.append(KickEvent(ts, m["nick"], m["target"], m["line"]))


GRAMMARS: tuple[Grammar, ...] = (
    Grammar(
        "normal",
        EventKind.NORMAL,
        _compile(r"<(?P<nick>\S+)> (?P<message>.+)"),
        _build_normal,
    ),
    Grammar(
        "join",
        EventKind.JOIN,
        _compile(r"\*\*\* Joins: (?P<nick>\S+) \(~?(?P<host>\S+)\)"),
        _build_join,
    ),
    Grammar(
        "quit",
        EventKind.QUIT,
        _compile(r"\*\*\* Quits: (?P<nick>\S+) \(~?(?P<host>\S+)\) \(.*\)"),
        _build_quit,
    ),
    Grammar(
        "mode",
        EventKind.MODE,
        _compile(
            r"\*\*\* (?P<nick>\S+) sets mode: "
            r"(?P<modes>[-+][ov]+(?:[-+][ov]+)?) (?P<targets>\S+(?: \S+)*)"
        ),
        _build_mode,
    ),
    Grammar(
        "action",
        EventKind.ACTION,
        _compile(r"\* (?P<nick>\S+) (?P<rest>.+)"),
        _build_action,
    ),
    Grammar(
        "nickchange",
        EventKind.NICKCHANGE,
        _compile(r"\*\*\* (?P<nick>\S+) is now known as (?P<new_nick>\S+)"),
        _build_nickchange,
    ),
    Grammar(
        "part",
        EventKind.PART,
        _compile(r"\*\*\* Parts: (?P<nick>\S+) \(~?(?P<host>\S+)\)"),
        _build_part,
    ),
    Grammar(
        "topic",
        EventKind.TOPIC,
        _compile(r"\*\*\* (?P<nick>\S+) changes topic to '(?P<topic>.+)'"),
        _build_topic,
    ),
    Grammar(
        "kick",
        EventKind.KICK,
        _compile(
            r"\*\*\* (?P<line>(?P<target>\S+) was kicked by (?P<nick>\S+) \(.*\))"
        ),
        _build_kick,
    ),
)
