# conftest.py

import io
import re
import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from termline import Terminal


class FakeStream(io.StringIO):
    """In-memory text stream that can pretend to be a tty."""

    def __init__(self, tty: bool = True):
        super().__init__()
        self._tty = tty
        self.flushes = 0

    def isatty(self):
        return self._tty

    def flush(self):
        self.flushes += 1
        super().flush()


class ScreenEmulator:
    """
    Minimal VT interpreter for the escapes termline emits.

    Handles LF (as CR+LF, like a tty with onlcr), CR, cursor up/down,
    erase-in-line and cursor visibility. SGR sequences are ignored.
    """
    _CSI = re.compile(r'\x1b\[([0-9;?]*)([ -/]*)([@-~])')

    def __init__(self):
        self.rows = [[]]
        self.row = 0
        self.col = 0
        self.cursor_visible = True

    def feed(self, data: str) -> "ScreenEmulator":
        pos = 0
        while pos < len(data):
            match = self._CSI.match(data, pos)
            if match:
                self._apply(match.group(1), match.group(3))
                pos = match.end()
                continue
            ch = data[pos]
            pos += 1
            if ch == '\n':
                self.row += 1
                self.col = 0
                self._ensure_row()
            elif ch == '\r':
                self.col = 0
            else:
                self._put(ch)
        return self

    def _ensure_row(self):
        while len(self.rows) <= self.row:
            self.rows.append([])

    def _put(self, ch):
        self._ensure_row()
        line = self.rows[self.row]
        while len(line) < self.col:
            line.append(' ')
        if self.col < len(line):
            line[self.col] = ch
        else:
            line.append(ch)
        self.col += 1

    def _apply(self, params, final):
        if final == 'A':
            self.row = max(0, self.row - int(params or 1))
        elif final == 'B':
            self.row += int(params or 1)
            self._ensure_row()
        elif final == 'K' and params == '2':
            self._ensure_row()
            self.rows[self.row] = []
        elif final == 'l' and params == '?25':
            self.cursor_visible = False
        elif final == 'h' and params == '?25':
            self.cursor_visible = True

    @property
    def lines(self):
        return [''.join(row).rstrip() for row in self.rows]


@pytest.fixture
def tty_stream():
    return FakeStream(tty=True)


@pytest.fixture
def pipe_stream():
    return FakeStream(tty=False)


@pytest.fixture
def ansi_terminal(tty_stream):
    return Terminal(stream=tty_stream, interactive=True, ansi=True)


@pytest.fixture
def plain_terminal(pipe_stream):
    return Terminal(stream=pipe_stream, interactive=False, ansi=False)
