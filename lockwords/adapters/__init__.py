"""
Adapters - External implementations of ports

This package contains implementations of the core ports:
- filesystem.py: File-backed wheel and dictionary sources
- memory.py: In-memory wheel and dictionary sources
"""
from .filesystem import FileWheelSource, FileDictionarySource
from .memory import InMemoryWheelSource, InMemoryDictionarySource

__all__ = [
    "FileWheelSource",
    "FileDictionarySource",
    "InMemoryWheelSource",
    "InMemoryDictionarySource",
]
