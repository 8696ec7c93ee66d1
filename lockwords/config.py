"""
Configuration and logging setup

Paths and flags come from the environment with sensible defaults; the
CLI and servers override them with their own arguments.
"""
import logging
import os
from datetime import datetime, timezone
from pathlib import Path

DEFAULT_WHEELS_PATH = "wheels.txt"
DEFAULT_DICTIONARY_PATH = "dictionary.txt"
DEFAULT_PORT = 5003

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"
LOG_DATEFMT = "%Y/%m/%d %H:%M:%S"


def get_wheels_path() -> Path:
    """Get wheel file path from env or use fallback"""
    return Path(os.environ.get("LOCKWORDS_WHEELS", DEFAULT_WHEELS_PATH))


def get_dictionary_path() -> Path:
    """Get dictionary file path from env or use fallback"""
    return Path(os.environ.get("LOCKWORDS_DICTIONARY", DEFAULT_DICTIONARY_PATH))


def get_strict() -> bool:
    """Abort on oversized dictionary lines instead of skipping them"""
    return os.environ.get("LOCKWORDS_STRICT", "").strip().lower() in ("1", "true", "yes", "on")


def get_port() -> int:
    """Get server port from environment or use default"""
    port_str = os.environ.get("PORT", str(DEFAULT_PORT))
    try:
        return int(port_str)
    except ValueError:
        msg = f"Invalid PORT value: {port_str}"
        raise ValueError(msg) from None


class MillisecondFormatter(logging.Formatter):
    """Custom formatter with milliseconds as :XXXX format"""
    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        """Override formatTime to include milliseconds with : separator"""
        ct = datetime.fromtimestamp(record.created, tz=timezone.utc)
        if datefmt:
            s = ct.strftime(datefmt)
            ms = int((record.created % 1) * 10000)
            return f"{s}:{ms:04d}"
        return super().formatTime(record, datefmt)


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure root logging to stderr with millisecond timestamps"""
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    logging.getLogger().setLevel(level)
    for handler in logging.root.handlers:
        handler.setFormatter(MillisecondFormatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
