"""
Filesystem Adapters

Implements WheelSpecSource and DictionarySource ports using local files.
"""
from pathlib import Path
from typing import Iterator

from ..core.domain import WheelSpec
from ..core.errors import ErrorKind, LockwordsError
from ..core.lock_model import parse_wheel_text
from ..core.ports import DictionarySource, WheelSpecSource


def _unavailable(path: Path, what: str, e: OSError) -> LockwordsError:
    reason = e.strerror or str(e)
    return LockwordsError(
        ErrorKind.SOURCE_UNAVAILABLE,
        f"Unable to open {what} file '{path}': {reason}"
    )


class FileWheelSource(WheelSpecSource):
    """Wheel specification read from a text file"""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def read(self) -> WheelSpec:
        try:
            text = self.path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise _unavailable(self.path, "wheel", e) from e
        return parse_wheel_text(text)

    def describe(self) -> str:
        return str(self.path)


class FileDictionarySource(DictionarySource):
    """Dictionary streamed line by line from a text file"""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def lines(self) -> Iterator[str]:
        try:
            fh = self.path.open("r", encoding="utf-8", errors="replace")
        except OSError as e:
            raise _unavailable(self.path, "dictionary", e) from e

        with fh:
            for line in fh:
                yield line.rstrip("\r\n")

    def describe(self) -> str:
        return str(self.path)
