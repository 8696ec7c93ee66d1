"""
Errors - Tagged error taxonomy

Every failure the core can report carries an ErrorKind so callers can
branch on what went wrong without parsing messages.
"""
from enum import Enum


class ErrorKind(str, Enum):
    """What kind of input or configuration problem occurred"""
    SOURCE_UNAVAILABLE = "source_unavailable"
    INVALID_WHEEL_COUNT = "invalid_wheel_count"
    INVALID_LETTERS_PER_WHEEL = "invalid_letters_per_wheel"
    INSUFFICIENT_LETTERS = "insufficient_letters"
    INVALID_CHARACTER = "invalid_character"
    TOO_MANY_LETTERS = "too_many_letters"
    WORD_TOO_LONG = "word_too_long"
    INVALID_WORD = "invalid_word"


class LockwordsError(Exception):
    """A reportable failure tagged with its ErrorKind"""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return self.message

    def as_result(self) -> dict:
        """Explicit failure result for delivery layers"""
        return {
            "success": False,
            "error": self.message,
            "error_kind": self.kind.value,
        }
