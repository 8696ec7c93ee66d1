"""
Domain Models - Pure business entities

No external dependencies. These represent the lock, its wheels and the
results of matching words against it.
"""
from dataclasses import dataclass, field
from typing import Optional

ALPHABET_LENGTH = 26
MAX_WORD_LENGTH = 255
ALL_LETTERS_MASK = (1 << ALPHABET_LENGTH) - 1


def letter_index(letter: str) -> Optional[int]:
    """Position of a letter in the alphabet (0-25), or None if not a-z/A-Z"""
    if len(letter) != 1:
        return None
    o = ord(letter)
    if 65 <= o <= 90:  # 'A'..'Z'
        return o - 65
    if 97 <= o <= 122:  # 'a'..'z'
        return o - 97
    return None


def normalize_word(raw: str) -> Optional[str]:
    """Lowercase a word, or None if it is empty or not purely a-z/A-Z"""
    if not raw:
        return None
    for c in raw:
        if letter_index(c) is None:
            return None
    return raw.lower()


@dataclass(frozen=True)
class Wheel:
    """One rotating disc: bit i of mask set => letter i is on the wheel"""
    mask: int

    def __post_init__(self):
        if not self.mask & ALL_LETTERS_MASK:
            raise ValueError("A wheel must carry at least one letter")
        if self.mask & ~ALL_LETTERS_MASK:
            raise ValueError(f"Wheel mask out of range: {self.mask:#x}")

    @classmethod
    def from_letters(cls, letters: str) -> "Wheel":
        mask = 0
        for c in letters:
            index = letter_index(c)
            if index is None:
                raise ValueError(f"Unsupported char: {c!r} (use a-z)")
            mask |= 1 << index
        return cls(mask)

    def __contains__(self, letter: str) -> bool:
        index = letter_index(letter)
        return index is not None and bool(self.mask >> index & 1)

    @property
    def letters(self) -> str:
        """Distinct letters on the wheel in alphabetical order"""
        return "".join(
            chr(97 + i) for i in range(ALPHABET_LENGTH) if self.mask >> i & 1
        )


@dataclass(frozen=True)
class Lock:
    """Ordered wheels, index 0 leftmost"""
    wheels: tuple[Wheel, ...]
    letters_per_wheel: int

    def __post_init__(self):
        if not self.wheels:
            raise ValueError("A lock must have at least one wheel")

    @property
    def wheel_count(self) -> int:
        return len(self.wheels)


@dataclass(frozen=True)
class WheelSpec:
    """Raw wheel specification as read from a source, before validation"""
    wheel_count: str
    letters_per_wheel: str
    wheel_lines: tuple[str, ...]


@dataclass(frozen=True)
class MatchResult:
    """Alignments of one word against a lock"""
    word: str
    offsets: tuple[int, ...]

    @property
    def count(self) -> int:
        return len(self.offsets)

    @property
    def matched(self) -> bool:
        return bool(self.offsets)


@dataclass
class ScanReport:
    """Results from scanning a dictionary against a lock"""
    matches: list[MatchResult] = field(default_factory=list)
    words_read: int = 0
    skipped_invalid: int = 0
    skipped_too_long: int = 0
    skipped_longer_than_lock: int = 0

    @property
    def total(self) -> int:
        """Total matching alignments (not distinct words)"""
        return sum(m.count for m in self.matches)
