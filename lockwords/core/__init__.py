"""
Core - Domain logic and ports

This package contains:
- domain.py: Pure domain models
- errors.py: Tagged error taxonomy
- lock_model.py: Lock construction from wheel specifications
- matcher.py: Word alignment matching
- ports.py: Port interfaces (abstractions for external dependencies)
- services.py: Application services (use cases)
"""
from .domain import Wheel, Lock, WheelSpec, MatchResult, ScanReport
from .errors import ErrorKind, LockwordsError
from .lock_model import build_lock, parse_wheel_text
from .matcher import count_alignments, find_alignments, match_word
from .ports import WheelSpecSource, DictionarySource
from .services import LoadLockService, ScanDictionaryService, CheckWordService

__all__ = [
    # Domain models
    "Wheel",
    "Lock",
    "WheelSpec",
    "MatchResult",
    "ScanReport",
    # Errors
    "ErrorKind",
    "LockwordsError",
    # Lock model and matcher
    "build_lock",
    "parse_wheel_text",
    "count_alignments",
    "find_alignments",
    "match_word",
    # Ports
    "WheelSpecSource",
    "DictionarySource",
    # Services
    "LoadLockService",
    "ScanDictionaryService",
    "CheckWordService",
]
