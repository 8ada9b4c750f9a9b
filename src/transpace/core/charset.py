"""Character code table shared by both unit encodings.

Codes 1-30 fit in five bits and are usable by the alphabetic encoding.
Digits take 31-40 and force the six-bit alphanumeric encoding.
Code 0 never maps to a character; it marks an unused slot.

    a-z / A-Z   1-26  (case folded)
    space       27
    _           28
    -           29
    .           30
    0-9         31-40
"""

from ..errors import InvalidCharacter

LETTERS = "abcdefghijklmnopqrstuvwxyz"
SYMBOLS = " _-."
DIGITS = "0123456789"

# Highest code each encoding can carry
MAX_ALPHABETIC_CODE = 30
MAX_ALPHANUMERIC_CODE = 40

# Code -> lowercase character (index 0 is the empty slot)
CODE_TO_CHAR = "\0" + LETTERS + SYMBOLS + DIGITS

# Character -> code, both letter cases
CHAR_TO_CODE = {c: i for i, c in enumerate(CODE_TO_CHAR) if i}
CHAR_TO_CODE.update({c.upper(): CHAR_TO_CODE[c] for c in LETTERS})

FIRST_DIGIT_CODE = CHAR_TO_CODE["0"]


def char_code(char: str, position: int | None = None) -> int:
    """Return the code for a single character."""
    code = CHAR_TO_CODE.get(char)
    if code is None:
        raise InvalidCharacter(
            f"Character {char!r} is outside [A-Za-z0-9 _.-]",
            char=char, position=position,
        )
    return code


def code_char(code: int, max_code: int = MAX_ALPHANUMERIC_CODE) -> str:
    """Return the lowercase character for a code in 1..max_code."""
    if not 1 <= code <= max_code:
        raise InvalidCharacter(
            f"Character code must be 1-{max_code}, got {code}", code=code,
        )
    return CODE_TO_CHAR[code]


def is_digit_code(code: int) -> bool:
    """Check whether a code belongs to the digit range."""
    return code >= FIRST_DIGIT_CODE
