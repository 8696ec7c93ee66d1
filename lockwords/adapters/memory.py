"""
In-Memory Adapters

Implements the source ports over strings and iterables, for inline
input from MCP tools and for tests.
"""
from typing import Iterable, Iterator

from ..core.domain import WheelSpec
from ..core.lock_model import parse_wheel_text
from ..core.ports import DictionarySource, WheelSpecSource


class InMemoryWheelSource(WheelSpecSource):
    """Wheel specification given as text in the wheel file format"""

    def __init__(self, text: str):
        self.text = text

    def read(self) -> WheelSpec:
        return parse_wheel_text(self.text)

    def describe(self) -> str:
        return "inline wheels"


class InMemoryDictionarySource(DictionarySource):
    """Dictionary given as newline-separated text or an iterable of words"""

    def __init__(self, words: str | Iterable[str]):
        if isinstance(words, str):
            words = words.splitlines()
        self.words = list(words)

    def lines(self) -> Iterator[str]:
        yield from self.words

    def describe(self) -> str:
        return f"inline dictionary ({len(self.words)} lines)"
