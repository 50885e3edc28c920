from __future__ import annotations

import pytest

from muh2log.errors import ModeCardinalityError, ParsingError
from muh2log.parser.modes import ModeChange, iter_mode_changes


def test_single_sign_many_letters():
    assert list(iter_mode_changes("+oov", ["a", "b", "c"])) == [
        ModeChange("+o", "a"),
        ModeChange("+o", "b"),
        ModeChange("+v", "c"),
    ]


def test_sign_switch_applies_to_following_letters():
    assert list(iter_mode_changes("-v+oo", ["a", "b", "c"])) == [
        ModeChange("-v", "a"),
        ModeChange("+o", "b"),
        ModeChange("+o", "c"),
    ]


def test_overflow_stops_before_missing_target():
    decoded = []
    with pytest.raises(ModeCardinalityError) as exc_info:
        for change in iter_mode_changes("+ovo", ["a", "b"]):
            decoded.append(change)
    assert decoded == [ModeChange("+o", "a"), ModeChange("+v", "b")]
    err = exc_info.value
    assert err.letters == 3
    assert err.decoded == 2
    assert err.data["targets"] == "a b"


def test_surplus_targets_raise_after_all_changes():
    decoded = []
    with pytest.raises(ModeCardinalityError) as exc_info:
        for change in iter_mode_changes("+o", ["a", "b"]):
            decoded.append(change)
    assert decoded == [ModeChange("+o", "a")]
    assert exc_info.value.decoded == 1


def test_cardinality_error_is_a_parsing_error():
    assert issubclass(ModeCardinalityError, ParsingError)


@pytest.mark.parametrize("modes", ["o", "+b", "+o*"])
def test_invalid_mode_characters(modes):
    with pytest.raises(ValueError):
        list(iter_mode_changes(modes, ["a", "b"]))
