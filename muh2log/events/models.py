"""Chat event models produced by the line classifier."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EventKind(Enum):
    NORMAL = "normal"
    JOIN = "join"
    QUIT = "quit"
    MODE = "mode"
    ACTION = "action"
    SLAP = "slap"
    NICKCHANGE = "nickchange"
    PART = "part"
    TOPIC = "topic"
    KICK = "kick"


@dataclass(frozen=True, slots=True)
class NormalEvent:
    timestamp: str
    nick: str
    message: str
    kind = EventKind.NORMAL


@dataclass(frozen=True, slots=True)
class JoinEvent:
    timestamp: str
    nick: str
    host: str
    kind = EventKind.JOIN


@dataclass(frozen=True, slots=True)
class QuitEvent:
    timestamp: str
    nick: str
    host: str
    kind = EventKind.QUIT


@dataclass(frozen=True, slots=True)
class ModeEvent:
    """One decoded mode change: ``nick`` set ``mode`` (e.g. ``+o``) on ``target``."""

    timestamp: str
    nick: str
    target: str
    mode: str
    kind = EventKind.MODE


@dataclass(frozen=True, slots=True)
class ActionEvent:
    timestamp: str
    nick: str
    message: str
    kind = EventKind.ACTION


@dataclass(frozen=True, slots=True)
class SlapEvent:
    """A slap; ``target`` is None when the slap names no one."""

    timestamp: str
    nick: str
    target: str | None
    kind = EventKind.SLAP


@dataclass(frozen=True, slots=True)
class NickchangeEvent:
    timestamp: str
    nick: str
    new_nick: str
    kind = EventKind.NICKCHANGE


@dataclass(frozen=True, slots=True)
class PartEvent:
    timestamp: str
    nick: str
    host: str
    kind = EventKind.PART


@dataclass(frozen=True, slots=True)
class TopicEvent:
    timestamp: str
    nick: str
    topic: str
    kind = EventKind.TOPIC


@dataclass(frozen=True, slots=True)
class KickEvent:
    """``nick`` kicked ``target``; ``line`` is the whole kick clause as logged."""

    timestamp: str
    nick: str
    target: str
    line: str
    kind = EventKind.KICK


ChatEvent = (
    NormalEvent
    | JoinEvent
    | QuitEvent
    | ModeEvent
    | ActionEvent
    | SlapEvent
    | NickchangeEvent
    | PartEvent
    | TopicEvent
    | KickEvent
)
