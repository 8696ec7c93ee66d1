"""
Matcher - slides a word across the lock and counts alignments

For each start offset the word's letters are tested against consecutive
wheel masks; the first missing letter abandons that offset. Every offset
that fully matches is counted, not just the first, so a short word can
contribute several alignments.
"""
from .domain import Lock, MatchResult, normalize_word
from .errors import ErrorKind, LockwordsError


def _lanes(word: str) -> list[int]:
    normalized = normalize_word(word)
    if normalized is None:
        raise LockwordsError(
            ErrorKind.INVALID_WORD,
            f"Invalid word {word!r}: expected one or more characters a-z"
        )
    return [ord(c) - 97 for c in normalized]


def find_alignments(lock: Lock, word: str) -> list[int]:
    """Offsets (leftmost wheel index) at which word can be dialled"""
    lanes = _lanes(word)
    wheels = lock.wheels
    space = len(wheels) - len(lanes)
    if space < 0:
        return []

    offsets = []
    for start in range(space + 1):
        for j, lane in enumerate(lanes):
            if not wheels[start + j].mask >> lane & 1:
                break
        else:
            offsets.append(start)
    return offsets


def count_alignments(lock: Lock, word: str) -> int:
    """Number of offsets at which word can be dialled (0 if longer than lock)"""
    return len(find_alignments(lock, word))


def match_word(lock: Lock, word: str) -> MatchResult:
    return MatchResult(word=word.lower(), offsets=tuple(find_alignments(lock, word)))
