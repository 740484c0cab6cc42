# display/terminal.py
import sys
from enum import Enum
from typing import Optional, TextIO

from .capabilities import Capabilities
from .style import visible_length

CSI = "\033["
ERASE_LINE = "\r" + CSI + "2K"
HIDE_CURSOR = CSI + "?25l"
SHOW_CURSOR = CSI + "?25h"


class Direction(Enum):
    """Final byte of a relative cursor movement."""

    UP = "A"
    DOWN = "B"


class DisplayTerminal:
    """Low-level line and cursor operations on a single output stream."""

    def __init__(self, capabilities: Capabilities, stream: Optional[TextIO] = None):
        """Initialize with the probed capabilities and the target stream."""
        self.capabilities = capabilities
        self._stream = stream if stream is not None else sys.stdout
        self._cursor_visible = True
        # Width of the last overwrite, used to blank it without ANSI
        self.prev_visible_length = 0

    @property
    def is_interactive(self) -> bool:
        return self.capabilities.interactive

    @property
    def ansi_enabled(self) -> bool:
        return self.capabilities.ansi

    @property
    def cursor_visible(self) -> bool:
        return self._cursor_visible

    def write(self, text: str = "") -> None:
        """Write text to the stream without a newline."""
        self._stream.write(text)
        self._stream.flush()

    def write_line(self, text: str = "") -> None:
        """Write text with newline."""
        self.write(text + "\n")
        self.prev_visible_length = 0

    def newline(self) -> None:
        self.write_line("")

    def carriage_return(self) -> None:
        self.write("\r")

    def flush(self) -> None:
        self._stream.flush()

    def clear_line(self) -> None:
        """Clear the current line and return to column 1."""
        if self.ansi_enabled:
            self.write(ERASE_LINE)
        else:
            # Best effort: blank out what the last overwrite printed
            pad = max(self.prev_visible_length, 0)
            self.write("\r" + " " * pad + "\r")

    def move_cursor(self, rows: int, direction: Direction) -> None:
        """Move the cursor vertically; there is no fallback without ANSI."""
        if rows <= 0 or not self.ansi_enabled:
            return
        self.write(f"{CSI}{rows}{direction.value}")

    def move_up(self, rows: int) -> None:
        self.move_cursor(rows, Direction.UP)

    def move_down(self, rows: int) -> None:
        self.move_cursor(rows, Direction.DOWN)

    def _manage_cursor(self, show: bool) -> None:
        """Toggle cursor visibility based on 'show' flag."""
        if self._cursor_visible != show and self.ansi_enabled:
            self._cursor_visible = show
            self.write(SHOW_CURSOR if show else HIDE_CURSOR)

    def show_cursor(self) -> None:
        self._manage_cursor(True)

    def hide_cursor(self) -> None:
        self._manage_cursor(False)

    def visible_length(self, text: str) -> int:
        return visible_length(text)
