"""Unit codec: up to six characters packed into one 31-bit integer.

Bit 30 selects the encoding:
    0  alphabetic    exactly 6 characters x 5 bits (codes 1-30)
    1  alphanumeric  1-5 characters x 6 bits (codes 1-40), left-padded with
                     empty slots

Text is cut greedily into windows of six characters. A window without digits
becomes an alphabetic unit. A window with a digit only fits five characters,
so it becomes an alphanumeric unit and the sixth character starts the next
window. Whatever is left at the end (1-5 characters) is alphanumeric.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from ..errors import InvalidCharacter
from .charset import (
    MAX_ALPHABETIC_CODE,
    MAX_ALPHANUMERIC_CODE,
    char_code,
    code_char,
    is_digit_code,
)

if TYPE_CHECKING:
    from ..engine.text_view import TextView

UNIT_BITS = 31
MAX_UNIT_VALUE = (1 << UNIT_BITS) - 1
ENCODING_BIT = 1 << 30
PAYLOAD_MASK = ENCODING_BIT - 1

ALPHABETIC_WIDTH = 6
ALPHABETIC_SHIFT = 5
ALPHANUMERIC_WIDTH = 5
ALPHANUMERIC_SHIFT = 6


class Encoding(Enum):
    ALPHABETIC = 0
    ALPHANUMERIC = 1


@dataclass(frozen=True, slots=True)
class Unit:
    """One packed bit cell.

    Any value in 0..2**31-1 is a valid unit, including values that do not
    decode to text (such as the `%1$s` sentinel). Use `decode()` to find out.
    """
    bits: int

    def __post_init__(self) -> None:
        if not 0 <= self.bits <= MAX_UNIT_VALUE:
            raise ValueError(
                f"Unit value must be 0-{MAX_UNIT_VALUE}, got {self.bits}"
            )

    @property
    def encoding(self) -> Encoding:
        """Which character encoding the unit uses."""
        if self.bits & ENCODING_BIT:
            return Encoding.ALPHANUMERIC
        return Encoding.ALPHABETIC

    @classmethod
    def encode(cls, fragment: str) -> Unit:
        """Encode a fragment of 1-6 characters."""
        return encode_unit(fragment)

    def decode(self) -> str:
        """Decode back to lowercase text."""
        return decode_unit(self)

    def text_view(self, strict: bool = True) -> TextView:
        """A text view over this single unit."""
        from ..engine.text_view import TextView

        return TextView((self,), strict=strict)

    def __str__(self) -> str:
        return f"%{self.bits}$s"

    def __repr__(self) -> str:
        return f"Unit({self.bits})"


def _pack(codes: list[int], shift: int) -> int:
    bits = 0
    for code in codes:
        bits = (bits << shift) | code
    return bits


def encode_next(text: str, pos: int = 0) -> tuple[Unit | None, int]:
    """Encode the next window of `text` starting at `pos`.

    Returns the unit and the position just past the characters it holds,
    or (None, pos) when nothing is left.
    """
    if pos >= len(text):
        return None, pos

    window = text[pos:pos + ALPHABETIC_WIDTH]
    codes = [char_code(c, pos + i) for i, c in enumerate(window)]

    if len(codes) == ALPHABETIC_WIDTH and not any(map(is_digit_code, codes)):
        return Unit(_pack(codes, ALPHABETIC_SHIFT)), pos + ALPHABETIC_WIDTH

    # All six characters were validated, but only five fit
    codes = codes[:ALPHANUMERIC_WIDTH]
    bits = ENCODING_BIT | _pack(codes, ALPHANUMERIC_SHIFT)
    return Unit(bits), pos + len(codes)


def encode_unit(fragment: str, is_final_fragment: bool | None = None) -> Unit:
    """Encode a fragment of 1-6 characters into a unit.

    Fragments shorter than six characters may only end the text; pass
    is_final_fragment=False to have that checked. A six-character fragment
    containing a digit keeps its first five characters.

    Raises:
        InvalidCharacter: a character is outside [A-Za-z0-9 _.-].
        ValueError: the fragment length is not 1-6, or a short fragment is
            marked as not final.
    """
    if not 1 <= len(fragment) <= ALPHABETIC_WIDTH:
        raise ValueError(
            f"Fragment must be 1-{ALPHABETIC_WIDTH} characters, got {len(fragment)}"
        )
    if is_final_fragment is False and len(fragment) < ALPHABETIC_WIDTH:
        raise ValueError(
            f"Only the final fragment may be shorter than {ALPHABETIC_WIDTH} characters"
        )
    unit, _ = encode_next(fragment)
    return unit


def _unpack(bits: int, count: int, shift: int) -> list[int]:
    """Split bits into `count` groups, most significant first."""
    mask = (1 << shift) - 1
    codes = []
    for _ in range(count):
        codes.append(bits & mask)
        bits >>= shift
    codes.reverse()
    return codes


def decode_unit(unit: Unit) -> str:
    """Decode a unit back to lowercase text.

    Raises:
        InvalidCharacter: the unit could not have been produced by the encoder.
    """
    payload = unit.bits & PAYLOAD_MASK

    if unit.encoding is Encoding.ALPHABETIC:
        codes = _unpack(payload, ALPHABETIC_WIDTH, ALPHABETIC_SHIFT)
        return "".join(code_char(c, MAX_ALPHABETIC_CODE) for c in codes)

    if not payload:
        raise InvalidCharacter(f"Alphanumeric unit {unit.bits} holds no characters")
    codes = _unpack(payload, ALPHANUMERIC_WIDTH, ALPHANUMERIC_SHIFT)
    while not codes[0]:
        codes.pop(0)
    return "".join(code_char(c, MAX_ALPHANUMERIC_CODE) for c in codes)
