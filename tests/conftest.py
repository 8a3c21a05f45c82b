"""Shared fixtures for modsync tests."""

import tempfile
import threading
from pathlib import Path
from typing import Optional

import pytest

from modsync.paths import ModPaths


class FakeMod:
    """In-memory server mod recording how it was used."""

    def __init__(
        self,
        name: str,
        data: bytes = b"",
        size: Optional[int] = None,
        error: Optional[BaseException] = None,
    ):
        self._name = name
        self.data = data
        self._size = len(data) if size is None else size
        self.error = error
        self.write_count = 0
        self.close_count = 0
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def size(self) -> int:
        return self._size

    def write_to(self, sink) -> int:
        with self._lock:
            self.write_count += 1
        if self.error is not None:
            raise self.error
        sink.write(self.data)
        return len(self.data)

    def close(self) -> None:
        with self._lock:
            self.close_count += 1


def make_mod(name: str, size: int, fill: bytes = b"s") -> FakeMod:
    """Create a fake server mod of the given size."""
    return FakeMod(name, fill * size)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mod_paths(temp_dir):
    """Directories rooted in a temporary install directory."""
    return ModPaths.from_install_dir(temp_dir / ".minecraft")


@pytest.fixture
def mods_dir(mod_paths):
    """Existing, empty mods directory."""
    mod_paths.mods_dir.mkdir(parents=True)
    return mod_paths.mods_dir
