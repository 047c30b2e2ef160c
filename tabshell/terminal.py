import os
import termios
from abc import ABC, abstractmethod


class ByteSource(ABC):
    @abstractmethod
    def next_byte(self):
        """Return the next input byte as an int, or None at end of input."""


class TerminalByteSource(ByteSource):
    """Reads standard input one unbuffered byte at a time."""

    def __init__(self, fd=0):
        self.fd = fd

    def next_byte(self):
        data = os.read(self.fd, 1)
        if not data:
            return None
        return data[0]


class RawMode:
    """Turn off echo and line buffering on a terminal for the enclosed block.

    The saved attributes are restored on exit whatever the outcome. When fd
    is not a terminal nothing is changed.
    """

    def __init__(self, fd=0):
        self.fd = fd
        self._saved = None

    def __enter__(self):
        try:
            self._saved = termios.tcgetattr(self.fd)
        except termios.error:
            self._saved = None
            return self
        raw = termios.tcgetattr(self.fd)
        raw[3] = raw[3] & ~(termios.ECHO | termios.ICANON)
        raw[6][termios.VMIN] = 1
        raw[6][termios.VTIME] = 0
        termios.tcsetattr(self.fd, termios.TCSAFLUSH, raw)
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._saved is not None:
            termios.tcsetattr(self.fd, termios.TCSAFLUSH, self._saved)
            self._saved = None
        return False
