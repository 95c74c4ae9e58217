"""Tests for input validation."""

import pytest

from strsearch.matching.validation import (
    InvalidInputError,
    InvalidInputKind,
    validate,
)


class TestValidate:

    def test_valid_input_returns_none(self):
        assert validate("ab", "abc") is None

    def test_equal_lengths_valid(self):
        validate("abc", "abc")

    @pytest.mark.parametrize("pattern, text", [
        ("", "abc"),
        ("a", ""),
        ("", ""),
        (None, "abc"),
        ("a", None),
    ])
    def test_empty(self, pattern, text):
        with pytest.raises(InvalidInputError) as exc_info:
            validate(pattern, text)
        assert exc_info.value.kind is InvalidInputKind.EMPTY
        assert "must be filled" in str(exc_info.value)

    def test_pattern_too_long(self):
        with pytest.raises(InvalidInputError) as exc_info:
            validate("abcd", "abc")
        assert exc_info.value.kind is InvalidInputKind.PATTERN_TOO_LONG
        assert "cannot be longer than text" in str(exc_info.value)

    def test_empty_checked_before_length(self):
        with pytest.raises(InvalidInputError) as exc_info:
            validate("abc", "")
        assert exc_info.value.kind is InvalidInputKind.EMPTY

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            validate("", "")
