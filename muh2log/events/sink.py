"""Event sink interface and the bundled in-memory sink."""

from __future__ import annotations

from collections import Counter
from dataclasses import fields
from typing import Protocol

from .models import (
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


class EventSink(Protocol):
    """Receiver of classified chat events, one method per event kind."""

    def set_normal(self, timestamp: str, nick: str, message: str) -> None: ...

    def set_join(self, timestamp: str, nick: str, host: str) -> None: ...

    def set_quit(self, timestamp: str, nick: str, host: str) -> None: ...

    def set_mode(self, timestamp: str, nick: str, target: str, mode: str) -> None: ...

    def set_action(self, timestamp: str, nick: str, message: str) -> None: ...

    def set_slap(self, timestamp: str, nick: str, target: str | None) -> None: ...

    def set_nickchange(self, timestamp: str, nick: str, new_nick: str) -> None: ...

    def set_part(self, timestamp: str, nick: str, host: str) -> None: ...

    def set_topic(self, timestamp: str, nick: str, topic: str) -> None: ...

    def set_kick(self, timestamp: str, nick: str, target: str, line: str) -> None: ...


SINK_METHODS: dict[EventKind, str] = {kind: f"set_{kind.value}" for kind in EventKind}


def dispatch_event(sink: EventSink, event: ChatEvent) -> None:
    """Call the sink method matching ``event.kind`` with the event's fields in order."""
    method = getattr(sink, SINK_METHODS[event.kind])
    method(*(getattr(event, f.name) for f in fields(event)))


class CollectingSink:
    """EventSink that keeps every event it receives, in arrival order."""

    def __init__(self) -> None:
        self.events: list[ChatEvent] = []

    def counts(self) -> Counter[EventKind]:
        return Counter(event.kind for event in self.events)

    def of_kind(self, kind: EventKind) -> list[ChatEvent]:
        return [event for event in self.events if event.kind is kind]

    def set_normal(self, timestamp: str, nick: str, message: str) -> None:
        self.events.append(NormalEvent(timestamp, nick, message))

    def set_join(self, timestamp: str, nick: str, host: str) -> None:
        self.events.append(JoinEvent(timestamp, nick, host))

    def set_quit(self, timestamp: str, nick: str, host: str) -> None:
        self.events.append(QuitEvent(timestamp, nick, host))

    def set_mode(self, timestamp: str, nick: str, target: str, mode: str) -> None:
        self.events.append(ModeEvent(timestamp, nick, target, mode))

    def set_action(self, timestamp: str, nick: str, message: str) -> None:
        self.events.append(ActionEvent(timestamp, nick, message))

    def set_slap(self, timestamp: str, nick: str, target: str | None) -> None:
        self.events.append(SlapEvent(timestamp, nick, target))

    def set_nickchange(self, timestamp: str, nick: str, new_nick: str) -> None:
        self.events.append(NickchangeEvent(timestamp, nick, new_nick))

    def set_part(self, timestamp: str, nick: str, host: str) -> None:
        self.events.append(PartEvent(timestamp, nick, host))

    def set_topic(self, timestamp: str, nick: str, topic: str) -> None:
        self.events.append(TopicEvent(timestamp, nick, topic))

    def set_kick(self, timestamp: str, nick: str, target: str, line: str) -> None:
        self.events.append(KickEvent(timestamp, nick, target, line))
