from __future__ import annotations

import pytest

from muh2log.events import EventKind
from muh2log.parser.grammar import GRAMMARS, SLAP_PATTERN

SAMPLES = {
    "normal": "[10:00] <alice> hi all",
    "join": "[10:00] *** Joins: bob (~bob@host)",
    "quit": "[10:00] *** Quits: bob (bob@host) (Ping timeout)",
    "mode": "[10:00] *** op sets mode: +v bob",
    "action": "[10:00] * bob dances",
    "nickchange": "[10:00] *** bob is now known as bobby",
    "part": "[10:00] *** Parts: bob (bob@host)",
    "topic": "[10:00] *** op changes topic to 'news'",
    "kick": "[10:00] *** bob was kicked by op (bye)",
}


def test_grammar_order():
    assert [g.name for g in GRAMMARS] == [
        "normal",
        "join",
        "quit",
        "mode",
        "action",
        "nickchange",
        "part",
        "topic",
        "kick",
    ]


def test_grammar_kinds_are_unique():
    kinds = [g.kind for g in GRAMMARS]
    assert len(set(kinds)) == len(kinds)
    assert EventKind.SLAP not in kinds


@pytest.mark.parametrize("name", sorted(SAMPLES))
def test_each_sample_matches_exactly_one_grammar(name):
    matching = [g.name for g in GRAMMARS if g.match(SAMPLES[name])]
    assert matching == [name]


def test_patterns_require_whole_line():
    join = next(g for g in GRAMMARS if g.name == "join")
    assert join.match(SAMPLES["join"] + " trailing") is None
    assert join.match("x" + SAMPLES["join"]) is None


def test_slap_pattern_target_optional():
    assert SLAP_PATTERN.fullmatch("slaps")["target"] is None
    assert SLAP_PATTERN.fullmatch("sLaPs bob")["target"] == "bob"
    assert SLAP_PATTERN.fullmatch("slapping bob") is None


def test_slap_pattern_is_ascii_only():
    assert SLAP_PATTERN.fullmatch("ſlaps bob") is None
    assert SLAP_PATTERN.fullmatch("SLAPS bob") is not None
