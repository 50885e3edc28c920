"""muh2 line classification: grammar table, mode decoding and the classifier."""

from .classifier import Classification, Diagnostic, LineClassifier
from .context import LineContext, NormalizedLine
from .grammar import GRAMMARS, Grammar
from .modes import ModeChange, iter_mode_changes

__all__ = [
    "GRAMMARS",
    "Classification",
    "Diagnostic",
    "Grammar",
    "LineClassifier",
    "LineContext",
    "ModeChange",
    "NormalizedLine",
    "iter_mode_changes",
]
