import os
import stat
import sys

import pytest

# Make the repository root importable so tests run without installing.
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from tabshell.terminal import ByteSource


class ScriptedByteSource(ByteSource):
    """Feeds a fixed byte string to the line editor, then reports EOF."""

    def __init__(self, data):
        if isinstance(data, str):
            data = data.encode("utf-8")
        self.data = data
        self.pos = 0

    def next_byte(self):
        if self.pos >= len(self.data):
            return None
        byte = self.data[self.pos]
        self.pos += 1
        return byte


@pytest.fixture
def scripted():
    return ScriptedByteSource


def _make_file(directory, name, executable=True):
    path = directory / name
    path.write_text("#!/bin/sh\necho \"$@\"\n")
    mode = 0o755 if executable else 0o644
    os.chmod(path, mode)
    return path


@pytest.fixture
def bin_dirs(tmp_path):
    """Two PATH directories with overlapping executables, plus a non-executable."""
    first = tmp_path / "bin1"
    second = tmp_path / "bin2"
    first.mkdir()
    second.mkdir()
    for name in ("foo", "food", "grep"):
        _make_file(first, name)
    for name in ("fool", "foo", "xyz_tool"):
        _make_file(second, name)
    _make_file(first, "fooled", executable=False)
    (first / "foodir").mkdir()
    return first, second


@pytest.fixture
def search_path(bin_dirs, tmp_path):
    first, second = bin_dirs
    return os.pathsep.join([str(first), str(tmp_path / "missing"), str(second)])
