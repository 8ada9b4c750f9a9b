"""Tests for the character code table."""
import pytest

from transpace.core.charset import (
    CHAR_TO_CODE,
    CODE_TO_CHAR,
    MAX_ALPHABETIC_CODE,
    MAX_ALPHANUMERIC_CODE,
    char_code,
    code_char,
    is_digit_code,
)
from transpace.errors import InvalidCharacter


class TestCodeTable:
    def test_letters_are_1_to_26(self):
        assert char_code("a") == 1
        assert char_code("z") == 26

    def test_case_folded(self):
        for c in "abcdefghijklmnopqrstuvwxyz":
            assert char_code(c.upper()) == char_code(c)

    def test_symbols(self):
        assert char_code(" ") == 27
        assert char_code("_") == 28
        assert char_code("-") == 29
        assert char_code(".") == 30

    def test_digits_are_31_to_40(self):
        assert char_code("0") == 31
        assert char_code("9") == 40

    def test_table_size(self):
        """26 letters in two cases, 4 symbols, 10 digits."""
        assert len(CHAR_TO_CODE) == 26 * 2 + 4 + 10
        assert len(CODE_TO_CHAR) == MAX_ALPHANUMERIC_CODE + 1

    def test_alphabetic_limit_is_last_symbol(self):
        assert code_char(MAX_ALPHABETIC_CODE) == "."


class TestCharCode:
    @pytest.mark.parametrize("char", ["!", "%", "$", "/", "\n", "é", "\0"])
    def test_outside_alphabet_raises(self, char):
        with pytest.raises(InvalidCharacter, match="outside"):
            char_code(char)

    def test_error_carries_position(self):
        with pytest.raises(InvalidCharacter) as excinfo:
            char_code("!", position=7)
        assert excinfo.value.char == "!"
        assert excinfo.value.position == 7

    def test_invalid_character_is_value_error(self):
        with pytest.raises(ValueError):
            char_code("#")


class TestCodeChar:
    def test_roundtrip(self):
        for code in range(1, MAX_ALPHANUMERIC_CODE + 1):
            assert char_code(code_char(code)) == code

    def test_output_is_lowercase(self):
        assert code_char(char_code("Q")) == "q"

    def test_zero_raises(self):
        with pytest.raises(InvalidCharacter, match="must be 1-40"):
            code_char(0)

    def test_digit_rejected_below_alphabetic_limit(self):
        with pytest.raises(InvalidCharacter, match="must be 1-30"):
            code_char(31, MAX_ALPHABETIC_CODE)

    def test_is_digit_code(self):
        assert is_digit_code(char_code("5"))
        assert not is_digit_code(char_code("."))
