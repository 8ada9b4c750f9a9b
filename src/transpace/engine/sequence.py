"""Sequence codec: whole strings to unit sequences and back.

    text --encode_all--> UnitSequence --render_tokens--> "%..$s%..$s"
    "%..$s%..$s" --decode_all_strict / decode_all_lossy--> UnitSequence
    UnitSequence --render_text--> text

These four functions (plus render_tokens) are the surface the command line
builds on.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from ..core.token import format_token, iter_tokens
from ..core.unit import Unit, encode_next
from ..logging import get_logger, trace
from .text_view import TextView

log = get_logger("engine.sequence")


@dataclass
class UnitSequence:
    """Ordered, mutable run of units in the order their text appeared."""
    units: list[Unit] = field(default_factory=list)

    @classmethod
    def from_values(cls, values: Iterable[int]) -> UnitSequence:
        """Build a sequence from raw integer values."""
        return cls([Unit(v) for v in values])

    @property
    def values(self) -> list[int]:
        """The integer value of every unit."""
        return [u.bits for u in self.units]

    def append(self, unit: Unit) -> None:
        self.units.append(unit)

    def text_view(self, strict: bool = True) -> TextView:
        """A lazy view of the decoded text."""
        return TextView(self.units, strict=strict)

    def __len__(self) -> int:
        return len(self.units)

    def __iter__(self) -> Iterator[Unit]:
        return iter(self.units)

    def __getitem__(self, index: int) -> Unit:
        return self.units[index]

    def __str__(self) -> str:
        return render_tokens(self)


@trace
def encode_all(text: str) -> UnitSequence:
    """Encode text into a unit sequence.

    Raises:
        InvalidCharacter: text holds a character outside [A-Za-z0-9 _.-].
    """
    sequence = UnitSequence()
    pos = 0
    while True:
        unit, pos = encode_next(text, pos)
        if unit is None:
            break
        sequence.append(unit)
    log.debug("encoded %d chars into %d units", len(text), len(sequence))
    return sequence


def _decode_all(text: str, lossy: bool) -> UnitSequence:
    sequence = UnitSequence(list(iter_tokens(text, lossy=lossy)))
    log.debug("parsed %d units from %d chars (lossy=%s)", len(sequence), len(text), lossy)
    return sequence


@trace
def decode_all_strict(text: str) -> UnitSequence:
    """Parse a string made only of placeholder tokens.

    Raises:
        InvalidEncoding: anything other than back-to-back tokens, or an
            integer that overflows 31 bits.
    """
    return _decode_all(text, lossy=False)


@trace
def decode_all_lossy(text: str) -> UnitSequence:
    """Parse every placeholder token in a string, ignoring other text.

    Raises:
        InvalidEncoding: a token's integer overflows 31 bits.
    """
    return _decode_all(text, lossy=True)


def render_tokens(sequence: Iterable[Unit]) -> str:
    """Concatenate the placeholder token of every unit."""
    return "".join(format_token(u) for u in sequence)


@trace
def render_text(sequence: Iterable[Unit], strict: bool = True) -> str:
    """Decode a unit sequence back into text.

    With strict=False, units that do not decode to text are left out.

    Raises:
        InvalidCharacter: strict mode and a unit does not decode.
    """
    return str(TextView(sequence, strict=strict))
