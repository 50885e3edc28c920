"""Decoding of multi-target mode strings such as ``+o-v carol dave``."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum, auto

from ..errors import ModeCardinalityError

MODE_SIGNS = "+-"
MODE_LETTERS = "ov"


class DecoderState(Enum):
    AWAITING_SIGN = auto()
    AWAITING_LETTER = auto()


@dataclass(frozen=True, slots=True)
class ModeChange:
    mode: str  # sign + letter, e.g. "+o"
    target: str


def iter_mode_changes(modes: str, targets: Sequence[str]) -> Iterator[ModeChange]:
    """Yield one ModeChange per mode letter, pairing letters with targets in order.

    A sign applies to every following letter until the next sign. The number
    of letters must equal ``len(targets)``: when a letter has no target left,
    decoding stops before yielding it; when targets remain after the last
    letter, every change is yielded first. Both cases then raise
    ModeCardinalityError.

    Raises:
        ModeCardinalityError: Letter and target counts differ.
        ValueError: ``modes`` contains a character other than a sign or
            a supported letter, or a letter precedes any sign.
    """
    state = DecoderState.AWAITING_SIGN
    sign = ""
    cursor = 0
    letters = sum(1 for ch in modes if ch in MODE_LETTERS)

    for ch in modes:
        if ch in MODE_SIGNS:
            sign = ch
            state = DecoderState.AWAITING_LETTER
            continue
        if ch not in MODE_LETTERS:
            raise ValueError(f"unsupported mode character {ch!r} in {modes!r}")
        if state is DecoderState.AWAITING_SIGN:
            raise ValueError(f"mode letter {ch!r} without sign in {modes!r}")
        if cursor >= len(targets):
            raise ModeCardinalityError(
                f"{letters} mode letter(s) but only {len(targets)} target(s)",
                data=_mismatch_data(modes, targets, letters, cursor),
            )
        yield ModeChange(sign + ch, targets[cursor])
        cursor += 1

    if cursor < len(targets):
        raise ModeCardinalityError(
            f"{len(targets)} target(s) but only {letters} mode letter(s)",
            data=_mismatch_data(modes, targets, letters, cursor),
        )


def _mismatch_data(
    modes: str, targets: Sequence[str], letters: int, decoded: int
) -> dict[str, object]:
    return {
        "modes": modes,
        "targets": " ".join(targets),
        "letters": letters,
        "decoded": decoded,
    }
