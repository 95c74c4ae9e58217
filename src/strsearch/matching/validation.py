"""Input gate run before every search.

The matchers assume a non-empty pattern no longer than a non-empty
text and never re-check it.
"""
from __future__ import annotations

from enum import Enum, auto


class InvalidInputKind(Enum):
    EMPTY = auto()
    PATTERN_TOO_LONG = auto()


_MESSAGES = {
    InvalidInputKind.EMPTY: "The sequence and pattern fields must be filled.",
    InvalidInputKind.PATTERN_TOO_LONG: "Target pattern cannot be longer than text.",
}


class InvalidInputError(ValueError):
    """Raised when a (pattern, text) pair cannot be searched."""

    def __init__(self, kind: InvalidInputKind) -> None:
        self.kind = kind
        super().__init__(_MESSAGES[kind])


def validate(pattern: str | None, text: str | None) -> None:
    """Raise InvalidInputError unless 0 < len(pattern) <= len(text)."""
    if not pattern or not text:
        raise InvalidInputError(InvalidInputKind.EMPTY)
    if len(pattern) > len(text):
        raise InvalidInputError(InvalidInputKind.PATTERN_TOO_LONG)
