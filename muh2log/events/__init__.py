"""Chat event models and sinks."""

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
from .sink import CollectingSink, EventSink, dispatch_event

__all__ = [
    "ActionEvent",
    "ChatEvent",
    "CollectingSink",
    "EventKind",
    "EventSink",
    "JoinEvent",
    "KickEvent",
    "ModeEvent",
    "NickchangeEvent",
    "NormalEvent",
    "PartEvent",
    "QuitEvent",
    "SlapEvent",
    "TopicEvent",
    "dispatch_event",
]
