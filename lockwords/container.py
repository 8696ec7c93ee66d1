"""
Dependency Injection Container

Wires together the hexagonal architecture by creating and injecting dependencies.
"""
from pathlib import Path

from .adapters import FileWheelSource, FileDictionarySource
from .core import LoadLockService, ScanDictionaryService, CheckWordService
from .core.ports import DictionarySource, WheelSpecSource


class Container:
    """Dependency injection container for the application"""

    def __init__(
        self,
        wheels_path: str | Path,
        dictionary_path: str | Path,
        strict: bool = False
    ):
        # Adapters (infrastructure)
        self.wheels = FileWheelSource(wheels_path)
        self.dictionary = FileDictionarySource(dictionary_path)
        self.strict = strict

        # Services (use cases)
        self.load_lock = LoadLockService(source=self.wheels)
        self.scan_dictionary = ScanDictionaryService(
            dictionary=self.dictionary,
            strict=strict
        )
        self.check_word = CheckWordService()

    def lock_loader(self, source: WheelSpecSource | None = None) -> LoadLockService:
        """Lock loader for an alternate wheel source (default: configured file)"""
        if source is None:
            return self.load_lock
        return LoadLockService(source=source)

    def scanner(
        self,
        dictionary: DictionarySource | None = None,
        strict: bool | None = None
    ) -> ScanDictionaryService:
        """Dictionary scanner for an alternate source or strictness"""
        if dictionary is None and (strict is None or strict == self.strict):
            return self.scan_dictionary
        return ScanDictionaryService(
            dictionary=dictionary if dictionary is not None else self.dictionary,
            strict=self.strict if strict is None else strict
        )
