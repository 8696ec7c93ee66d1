"""
Ports - Interfaces for external dependencies

These define HOW the core receives its two data feeds (the wheel
specification and the dictionary), but NOT where they come from.
"""
from abc import ABC, abstractmethod
from typing import Iterator

from .domain import WheelSpec


class WheelSpecSource(ABC):
    """Port for reading the lock's wheel specification"""

    @abstractmethod
    def read(self) -> WheelSpec:
        """Read raw counts and wheel letter lines"""
        pass

    @abstractmethod
    def describe(self) -> str:
        """Human-readable origin of the spec (path, 'inline', ...)"""
        pass


class DictionarySource(ABC):
    """Port for streaming candidate words"""

    @abstractmethod
    def lines(self) -> Iterator[str]:
        """Yield raw dictionary lines, one candidate per line"""
        pass

    @abstractmethod
    def describe(self) -> str:
        """Human-readable origin of the dictionary"""
        pass
