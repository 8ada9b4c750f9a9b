"""Placeholder tokens: `%<n>$s` rendering and parsing of units.

Grammar:  % [1-9] [0-9]* $ s

All three parse modes run the same scanner:
    ONE    the whole string must be exactly one token
    NEXT   read one token at the cursor; the rest is left for later calls
    LOSSY  skip anything that is not a token until one is found

An integer literal that overflows 31 bits is an error in every mode. Even
when scanning lossily it is clear a token was meant, so it is reported
instead of being skipped.
"""
from __future__ import annotations

from enum import Enum
from typing import Iterator

from ..errors import InvalidEncoding
from .unit import MAX_UNIT_VALUE, Unit

MIN_TOKEN_LENGTH = 4  # %1$s
TOKEN_START = "%"
TOKEN_END = "$s"


class ParseMode(Enum):
    ONE = "one"
    NEXT = "next"
    LOSSY = "lossy"


def format_token(unit: Unit) -> str:
    """Render a unit as a placeholder token."""
    return f"{TOKEN_START}{unit.bits}{TOKEN_END}"


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _scan(text: str, pos: int, mode: ParseMode) -> tuple[Unit | None, int]:
    """Find the next token at or after `pos` according to `mode`.

    Returns the unit and the position just past it, or (None, end) when
    no token remains.
    """
    end = len(text)

    while end - pos >= MIN_TOKEN_LENGTH:
        start = pos
        if text[pos] != TOKEN_START or text[pos + 1] not in "123456789":
            if mode is ParseMode.LOSSY:
                pos += 1
                continue
            raise InvalidEncoding(
                f"Expected a placeholder token at position {pos}", position=pos
            )

        value = ord(text[pos + 1]) - ord("0")
        pos += 2
        while pos < end and _is_digit(text[pos]):
            value = value * 10 + ord(text[pos]) - ord("0")
            if value > MAX_UNIT_VALUE:
                raise InvalidEncoding(
                    f"Placeholder at position {start} exceeds {MAX_UNIT_VALUE}",
                    position=start,
                )
            pos += 1

        if text.startswith(TOKEN_END, pos):
            pos += len(TOKEN_END)
            if mode is ParseMode.ONE and pos != end:
                raise InvalidEncoding(
                    f"Unexpected characters after placeholder at position {pos}",
                    position=pos,
                )
            return Unit(value), pos

        if mode is not ParseMode.LOSSY:
            raise InvalidEncoding(
                f"Malformed placeholder at position {start}", position=start
            )
        # Resume at the character that broke the candidate; it may open a new one

    if mode is ParseMode.LOSSY or (mode is ParseMode.NEXT and pos == end):
        return None, end
    raise InvalidEncoding(
        f"Expected a placeholder token at position {pos}", position=pos
    )


def parse_one(text: str) -> Unit:
    """Parse a string holding exactly one placeholder token."""
    unit, _ = _scan(text, 0, ParseMode.ONE)
    return unit


def parse_next(text: str, pos: int = 0) -> tuple[Unit | None, int]:
    """Parse the token at `pos`.

    Returns (unit, new_pos), or (None, pos) at the end of the string.
    Raises InvalidEncoding if the remaining text does not start with a token.
    """
    return _scan(text, pos, ParseMode.NEXT)


def parse_lossy(text: str, pos: int = 0) -> tuple[Unit | None, int]:
    """Parse the next token at or after `pos`, skipping anything else.

    Returns (unit, new_pos), or (None, len(text)) once no token remains.
    """
    return _scan(text, pos, ParseMode.LOSSY)


def iter_tokens(text: str, lossy: bool = False) -> Iterator[Unit]:
    """Yield every unit in a string of placeholder tokens."""
    parse = parse_lossy if lossy else parse_next
    pos = 0
    while True:
        unit, pos = parse(text, pos)
        if unit is None:
            return
        yield unit
