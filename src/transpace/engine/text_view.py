"""Lazy text views over decoded units.

A TextView turns units back into text one unit at a time. Each iteration
starts from the first unit again. In strict mode an undecodable unit raises
InvalidCharacter and stops iteration; otherwise such units are skipped,
which hides real template placeholders such as the leading `%1$s`.

Fragments come from a per-cursor scratch slot that each advance overwrites.
Keep your own reference if a fragment must outlive the next step.
"""
from __future__ import annotations

from typing import Iterable, Iterator

from ..core.unit import Unit, decode_unit
from ..errors import InvalidCharacter


class TextCursor:
    """Forward cursor over the decoded fragments of a unit run."""

    __slots__ = ("_units", "_index", "strict", "fragment")

    def __init__(self, units: tuple[Unit, ...], strict: bool) -> None:
        self._units = units
        self._index = 0
        self.strict = strict
        # Most recently produced fragment, replaced on every advance
        self.fragment: str | None = None

    def next(self) -> str | None:
        """Decode the next unit, or return None when no units remain."""
        while self._index < len(self._units):
            unit = self._units[self._index]
            self._index += 1
            try:
                self.fragment = decode_unit(unit)
            except InvalidCharacter:
                if self.strict:
                    self.fragment = None
                    raise
                continue
            return self.fragment
        self.fragment = None
        return None

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        fragment = self.next()
        if fragment is None:
            raise StopIteration
        return fragment


class TextView:
    """Restartable sequence of decoded text fragments (1-6 characters each)."""

    def __init__(self, units: Iterable[Unit], strict: bool = True) -> None:
        self.units = tuple(units)
        self.strict = strict

    def cursor(self) -> TextCursor:
        """Start a new pass over the units."""
        return TextCursor(self.units, self.strict)

    def __iter__(self) -> Iterator[str]:
        return self.cursor()

    def __str__(self) -> str:
        return "".join(self)

    def __repr__(self) -> str:
        return f"TextView(units={len(self.units)}, strict={self.strict})"
