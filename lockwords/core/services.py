"""
Application Services - Use cases that orchestrate domain logic

These are the entry points to the core. They coordinate between the
lock model, the matcher and the ports, but contain no infrastructure
concerns.
"""
import logging
from typing import Iterator, Optional

from .domain import MAX_WORD_LENGTH, Lock, MatchResult, ScanReport, normalize_word
from .errors import ErrorKind, LockwordsError
from .lock_model import lock_from_spec
from .matcher import match_word
from .ports import DictionarySource, WheelSpecSource

logger = logging.getLogger(__name__)


class LoadLockService:
    """Use case: Read the wheel specification and build the lock"""

    def __init__(self, source: WheelSpecSource):
        self.source = source

    def execute(self) -> Lock:
        spec = self.source.read()
        lock = lock_from_spec(spec)
        logger.info(
            f"Loaded lock from {self.source.describe()}: "
            f"{lock.wheel_count} wheels x {lock.letters_per_wheel} letters"
        )
        return lock


class ScanDictionaryService:
    """Use case: Find every dictionary word the lock can spell"""

    def __init__(
        self,
        dictionary: DictionarySource,
        max_word_length: int = MAX_WORD_LENGTH,
        strict: bool = False
    ):
        self.dictionary = dictionary
        self.max_word_length = max_word_length
        self.strict = strict

    def iter_matches(
        self,
        lock: Lock,
        report: Optional[ScanReport] = None
    ) -> Iterator[MatchResult]:
        """
        Stream matching words in dictionary order.

        Skip counters are recorded on report when one is given. Words
        that match no alignment are not yielded.
        """
        if report is None:
            report = ScanReport()

        for line_number, raw in enumerate(self.dictionary.lines(), start=1):
            candidate = raw.strip()
            if not candidate:
                continue
            report.words_read += 1

            if len(candidate) > self.max_word_length:
                if self.strict:
                    raise LockwordsError(
                        ErrorKind.WORD_TOO_LONG,
                        f"Word in dictionary exceeded maximum length of "
                        f"{self.max_word_length} (line {line_number})."
                    )
                logger.warning(
                    f"Skipping line {line_number}: {len(candidate)} characters "
                    f"exceeds maximum of {self.max_word_length}"
                )
                report.skipped_too_long += 1
                continue

            word = normalize_word(candidate)
            if word is None:
                logger.debug(f"Skipping line {line_number}: {candidate!r} is not alphabetic")
                report.skipped_invalid += 1
                continue

            # Longer than the lock: can never be a combination
            if len(word) > lock.wheel_count:
                report.skipped_longer_than_lock += 1
                continue

            result = match_word(lock, word)
            if result.matched:
                yield result

    def execute(self, lock: Lock) -> ScanReport:
        """Scan the whole dictionary and return the aggregate report"""
        report = ScanReport()
        for result in self.iter_matches(lock, report):
            report.matches.append(result)
        logger.info(
            f"Scanned {report.words_read} words from {self.dictionary.describe()}: "
            f"{len(report.matches)} combinations, {report.total} alignments"
        )
        return report


class CheckWordService:
    """Use case: Check a single word against the lock"""

    def execute(self, lock: Lock, word: str) -> MatchResult:
        candidate = word.strip()
        if len(candidate) > MAX_WORD_LENGTH:
            raise LockwordsError(
                ErrorKind.WORD_TOO_LONG,
                f"Word exceeds maximum length of {MAX_WORD_LENGTH}."
            )
        return match_word(lock, candidate)
