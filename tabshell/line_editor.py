import codecs
from contextlib import nullcontext

from tabshell.completion import EMPTY_STATE, CommandCompleter

NEWLINE = ("\n", "\r")
TAB = "\t"
BACKSPACE = ("\x7f", "\b")
CTRL_D = "\x04"
ESCAPE = "\x1b"
# Bytes that introduce a multi-byte key sequence after ESC (CSI and SS3).
SEQUENCE_INTRODUCERS = ("[", "O")
ERASE = "\b \b"


class LineEditor:
    """Reads one line at a time from a byte source, echoing and editing it.

    The terminal is expected to be in raw mode while a line is read, so every
    visible character is written here. The tab completion state belongs to
    the editor and carries over from one line to the next.
    """

    def __init__(self, source, out, completer=None, raw_mode=None):
        self.source = source
        self.out = out
        self.completer = completer or CommandCompleter()
        self.raw_mode = raw_mode
        self.completion_state = EMPTY_STATE

    def write(self, text):
        if text:
            self.out.write(text)
            self.out.flush()

    def read_line(self):
        """Return the next line without its newline.

        Raises EOFError when input ends (or Ctrl-D is typed) on an empty line.
        """
        scope = self.raw_mode if self.raw_mode is not None else nullcontext()
        with scope:
            return self._read_chars()

    def _read_chars(self):
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        buffer = []
        escape = None

        while True:
            byte = self.source.next_byte()
            if byte is None:
                if not buffer:
                    raise EOFError
                self.write("\n")
                return "".join(buffer)

            for char in decoder.decode(bytes([byte])):
                if escape == ESCAPE:
                    escape = char if char in SEQUENCE_INTRODUCERS else None
                    continue
                if escape is not None:
                    # Sequence ends at its final byte, @ through ~.
                    if "@" <= char <= "~":
                        escape = None
                    continue

                if char == ESCAPE:
                    escape = ESCAPE
                elif char in NEWLINE:
                    self.write("\n")
                    return "".join(buffer)
                elif char == TAB:
                    result = self.completer.complete("".join(buffer), self.completion_state)
                    buffer = list(result.line)
                    self.completion_state = result.state
                    self.write(result.output)
                elif char in BACKSPACE:
                    if buffer:
                        buffer.pop()
                        self.write(ERASE)
                elif char == CTRL_D:
                    if not buffer:
                        raise EOFError
                elif char.isprintable():
                    buffer.append(char)
                    self.write(char)
