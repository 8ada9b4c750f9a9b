"""Error types raised by the transpace codecs.

Both kinds are ValueError subclasses so callers that only care about bad
input can catch ValueError, as with the rest of the package.
"""


class TranspaceError(ValueError):
    """Base class for malformed text or malformed placeholder strings."""


class InvalidCharacter(TranspaceError):
    """A character, or a decoded character code, is outside the alphabet."""

    def __init__(self, message: str, *, char: str | None = None,
                 code: int | None = None, position: int | None = None) -> None:
        super().__init__(message)
        self.char = char
        self.code = code
        self.position = position


class InvalidEncoding(TranspaceError):
    """A placeholder token is malformed or its integer overflows a unit."""

    def __init__(self, message: str, *, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position
