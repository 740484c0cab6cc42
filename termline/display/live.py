# display/live.py

from contextlib import contextmanager
from enum import Enum
from typing import Iterator


class LiveState(Enum):
    IDLE = "idle"
    ACTIVE = "active"


class LiveBlock:
    """
    Reserves a fixed number of terminal lines and rewrites them in place.

    While a block is active the cursor rests at column 1 of the block's top
    line between calls, and stays hidden. Without an interactive ANSI
    terminal no block is ever reserved and updates are printed as plain
    lines instead.
    """
    def __init__(self, terminal, logger):
        """
        Initialize the live block controller.

        Args:
            terminal: DisplayTerminal used for all output
            logger: Logger instance for debug tracing
        """
        self.terminal = terminal
        self.logger = logger
        self._lines = 0

    @property
    def state(self) -> LiveState:
        return LiveState.ACTIVE if self._lines > 0 else LiveState.IDLE

    @property
    def line_count(self) -> int:
        return self._lines

    @property
    def is_active(self) -> bool:
        return self._lines > 0

    def begin(self, lines: int) -> None:
        """Reserve lines below the cursor and park the cursor at the block's top."""
        if self.is_active:
            self.logger.debug(f"Live block of {self._lines} lines still open; finishing it first")
            self.finish(leave_content=True)

        term = self.terminal
        if lines <= 0 or not term.is_interactive or not term.ansi_enabled:
            self.logger.debug(f"Live block of {lines} lines unavailable; updates print as lines")
            self._lines = 0
            return

        term.write("\n" * lines)
        term.move_up(lines)
        term.carriage_return()
        self._lines = lines
        term.hide_cursor()
        self.logger.debug(f"Live block started with {lines} lines")

    def update(self, index: int, text: str) -> None:
        """
        Rewrite one line of the block (0 = top).

        Indices past the bottom land on the last line and negative indices
        are ignored. With no active block the text is printed as a line.
        """
        if not self.is_active:
            self.terminal.write_line(text)
            return
        if index < 0:
            return
        index = min(index, self._lines - 1)

        term = self.terminal
        term.move_down(index)
        term.clear_line()
        term.write(text + "\r")
        term.move_up(index)
        term.flush()

    def finish(self, leave_content: bool = True) -> None:
        """Move below the block, optionally erase it, and show the cursor again."""
        term = self.terminal
        lines = self._lines
        if lines > 0:
            term.move_down(lines)
            term.carriage_return()
            if not leave_content:
                for _ in range(lines):
                    term.move_up(1)
                    term.clear_line()
                term.move_down(lines)
                term.carriage_return()
            self.logger.debug(f"Live block of {lines} lines finished (leave_content={leave_content})")

        term.show_cursor()
        self._lines = 0
        term.prev_visible_length = 0
        term.newline()

    @contextmanager
    def live(self, lines: int, leave_content: bool = True) -> Iterator["LiveBlock"]:
        """Context manager that always finishes the block it begins."""
        self.begin(lines)
        try:
            yield self
        finally:
            self.finish(leave_content=leave_content)
