"""Shared fixtures for lockwords tests"""
import pytest

from lockwords.core.lock_model import build_lock


@pytest.fixture
def ab_lock():
    """Three wheels, each carrying 'a' and 'b'"""
    return build_lock(3, 2, ["ab", "ab", "ab"])


@pytest.fixture
def lock_files(tmp_path):
    """Write a wheel file and dictionary file, return their paths"""
    def _write(wheels: str, words: list[str]):
        wheels_path = tmp_path / "wheels.txt"
        dictionary_path = tmp_path / "dictionary.txt"
        wheels_path.write_text(wheels, encoding="utf-8")
        dictionary_path.write_text("\n".join(words) + "\n", encoding="utf-8")
        return wheels_path, dictionary_path
    return _write
