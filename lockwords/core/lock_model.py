"""
Lock Model - builds a Lock from raw wheel specification data

Validates the declared counts and each wheel's letter line, then packs
every wheel's letters into a 26-bit membership mask.
"""
from typing import Iterable, Union

from .domain import Lock, Wheel, WheelSpec, letter_index
from .errors import ErrorKind, LockwordsError


def parse_count(raw: Union[int, str], kind: ErrorKind, what: str) -> int:
    """Parse a positive integer count, raising a tagged error otherwise"""
    if isinstance(raw, int):
        value = raw
    else:
        token = str(raw).strip()
        # ASCII digits only
        value = int(token) if token.isascii() and token.isdigit() else 0
    if value <= 0:
        raise LockwordsError(
            kind,
            f"Invalid value for {what}: {raw!r}. Expecting number greater than 0."
        )
    return value


def build_wheel(line: str, letters_per_wheel: int, position: int) -> Wheel:
    """Build one wheel from its letter line (exactly letters_per_wheel chars)"""
    if len(line) > letters_per_wheel:
        raise LockwordsError(
            ErrorKind.TOO_MANY_LETTERS,
            f"Wheel {position + 1} contained too many letters "
            f"({len(line)}, expected {letters_per_wheel})."
        )

    mask = 0
    for j in range(letters_per_wheel):
        if j >= len(line):
            raise LockwordsError(
                ErrorKind.INSUFFICIENT_LETTERS,
                f"Wheel {position + 1} contained insufficient letters "
                f"({len(line)}, expected {letters_per_wheel})."
            )
        index = letter_index(line[j])
        if index is None:
            raise LockwordsError(
                ErrorKind.INVALID_CHARACTER,
                f"Non-alphabetical character {line[j]!r} found on wheel {position + 1}. "
                "Ensure only characters a-z or A-Z are used."
            )
        mask |= 1 << index
    return Wheel(mask)


def build_lock(
    wheel_count: Union[int, str],
    letters_per_wheel: Union[int, str],
    wheel_lines: Iterable[str]
) -> Lock:
    """
    Build a Lock of wheel_count wheels.

    Both counts must be positive; each of the first wheel_count lines must
    hold exactly letters_per_wheel alphabetic characters. Lines missing at
    the end count as insufficient letters. Extra lines are ignored.
    """
    count = parse_count(wheel_count, ErrorKind.INVALID_WHEEL_COUNT, "wheel count")
    per_wheel = parse_count(
        letters_per_wheel, ErrorKind.INVALID_LETTERS_PER_WHEEL, "letters per wheel"
    )

    lines = iter(wheel_lines)
    wheels = []
    for position in range(count):
        line = next(lines, "")
        wheels.append(build_wheel(line, per_wheel, position))
    return Lock(wheels=tuple(wheels), letters_per_wheel=per_wheel)


def parse_wheel_text(text: str) -> WheelSpec:
    """
    Split wheel file text into counts and letter lines.

    The first two whitespace-separated tokens are the wheel count and the
    letters per wheel; wheel lines start on the line after the second token.
    """
    lines = [line.rstrip("\r") for line in text.split("\n")]
    tokens: list[str] = []
    next_line = len(lines)

    for i, line in enumerate(lines):
        parts = line.split()
        tokens.extend(parts)
        if len(tokens) >= 2:
            if len(tokens) > 2:
                parse_count(tokens[0], ErrorKind.INVALID_WHEEL_COUNT, "wheel count")
                raise LockwordsError(
                    ErrorKind.INVALID_LETTERS_PER_WHEEL,
                    f"Unexpected text after letters per wheel: {' '.join(tokens[2:])!r}"
                )
            next_line = i + 1
            break

    wheel_count = tokens[0] if tokens else ""
    letters_per_wheel = tokens[1] if len(tokens) > 1 else ""
    return WheelSpec(
        wheel_count=wheel_count,
        letters_per_wheel=letters_per_wheel,
        wheel_lines=tuple(lines[next_line:])
    )


def lock_from_spec(spec: WheelSpec) -> Lock:
    return build_lock(spec.wheel_count, spec.letters_per_wheel, spec.wheel_lines)
