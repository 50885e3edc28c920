"""Classifier for muh2 IRC chat logs."""

from .events import CollectingSink, EventKind, EventSink
from .parser import LineClassifier, LineContext, NormalizedLine

__all__ = [
    "CollectingSink",
    "EventKind",
    "EventSink",
    "LineClassifier",
    "LineContext",
    "NormalizedLine",
]

__version__ = "0.1.0"
