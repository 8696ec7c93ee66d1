"""
MCP Tool Handlers

Shared handlers for MCP tools that use the hexagonal core.
"""
import asyncio
import logging
from typing import Any, Optional

from ...container import Container
from ...core.domain import Lock, MatchResult
from ...core.errors import LockwordsError
from ..memory import InMemoryDictionarySource, InMemoryWheelSource

logger = logging.getLogger(__name__)


def _lock_summary(lock: Lock) -> dict[str, Any]:
    return {
        "wheel_count": lock.wheel_count,
        "letters_per_wheel": lock.letters_per_wheel,
    }


def _match_dict(result: MatchResult) -> dict[str, Any]:
    return {
        "word": result.word,
        "count": result.count,
        "offsets": list(result.offsets),
    }


class MCPHandlers:
    """Handlers for MCP tools using dependency injection"""

    def __init__(self, container: Container):
        self.container = container

    def _load_lock(self, wheels: Optional[str]) -> tuple[Lock, str]:
        """Load lock from inline wheel text, or the configured wheel file"""
        source = InMemoryWheelSource(wheels) if wheels is not None else None
        loader = self.container.lock_loader(source)
        return loader.execute(), loader.source.describe()

    async def find_combinations(
        self,
        wheels: Optional[str] = None,
        dictionary: Optional[str] = None,
        strict: Optional[bool] = None,
        max_results: int = 100
    ) -> dict[str, Any]:
        """Scan dictionary against the lock and list every combination"""
        try:
            lock, wheel_source = await asyncio.to_thread(self._load_lock, wheels)

            words = InMemoryDictionarySource(dictionary) if dictionary is not None else None
            scanner = self.container.scanner(dictionary=words, strict=strict)
            report = await asyncio.to_thread(scanner.execute, lock)

            shown = report.matches[:max_results] if max_results > 0 else report.matches
            return {
                "success": True,
                "combinations": [_match_dict(m) for m in shown],
                "combination_count": len(report.matches),
                "total": report.total,
                "truncated": len(shown) < len(report.matches),
                "words_read": report.words_read,
                "skipped": {
                    "invalid": report.skipped_invalid,
                    "too_long": report.skipped_too_long,
                    "longer_than_lock": report.skipped_longer_than_lock,
                },
                "lock": _lock_summary(lock),
                "sources": {
                    "wheels": wheel_source,
                    "dictionary": scanner.dictionary.describe(),
                }
            }

        except LockwordsError as e:
            logger.warning(f"find_combinations failed: {e}")
            return e.as_result()
        except Exception as e:
            logger.exception("find_combinations crashed")
            return {
                "success": False,
                "error": f"Failed to find combinations: {str(e)}"
            }

    async def check_word(
        self,
        word: str,
        wheels: Optional[str] = None
    ) -> dict[str, Any]:
        """Check one word against the lock"""
        try:
            lock, _ = await asyncio.to_thread(self._load_lock, wheels)
            result = self.container.check_word.execute(lock, word)

            return {
                "success": True,
                "matched": result.matched,
                **_match_dict(result),
                "lock": _lock_summary(lock),
            }

        except LockwordsError as e:
            return e.as_result()
        except Exception as e:
            logger.exception("check_word crashed")
            return {
                "success": False,
                "error": f"Failed to check word: {str(e)}"
            }

    async def describe_lock(self, wheels: Optional[str] = None) -> dict[str, Any]:
        """Describe the lock's wheels"""
        try:
            lock, wheel_source = await asyncio.to_thread(self._load_lock, wheels)

            return {
                "success": True,
                **_lock_summary(lock),
                "wheels": [wheel.letters for wheel in lock.wheels],
                "source": wheel_source,
            }

        except LockwordsError as e:
            return e.as_result()
        except Exception as e:
            logger.exception("describe_lock crashed")
            return {
                "success": False,
                "error": f"Failed to describe lock: {str(e)}"
            }
