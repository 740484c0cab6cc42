# interface.py

from contextlib import contextmanager
from dataclasses import replace
from typing import Iterable, Iterator, Optional

from .config import TerminalConfig
from .logger import Logger
from .display import Display, LiveBlock, strip_ansi, visible_length


class Terminal:
    """
    Main entry point for writing to the terminal.

    One instance is one session: the output stream is probed once at
    construction and every later call reuses that result. Not thread-safe;
    callers serialize access.

    Usage:
        term = Terminal()
        term.begin_live(2)
        term.update_live(0, "first")
        term.update_live(1, "second")
        term.finish_live()

        term.overwrite("Working... 10%")
        term.overwrite("Working... 100%")
        term.newline()

        term.writeln(term.colorize("OK", "green", None, ["bold"]))
    """

    def __init__(self, config: Optional[TerminalConfig] = None, **overrides):
        """
        Initialize the session.

        Args:
            config: Session settings. Defaults to TerminalConfig().
            **overrides: TerminalConfig fields replacing those in config.
        """
        config = config or TerminalConfig()
        if overrides:
            config = replace(config, **overrides)
        self.config = config
        self.logger = Logger('termline', config.logging_enabled, config.log_file)
        self.display = Display(config, self.logger)

    @property
    def is_interactive(self) -> bool:
        return self.display.capabilities.interactive

    @property
    def ansi_enabled(self) -> bool:
        return self.display.capabilities.ansi

    @property
    def live_active(self) -> bool:
        return self.display.live.is_active

    # Basic output

    def write(self, text: str) -> None:
        self.display.terminal.write(text)

    def writeln(self, text: str = "") -> None:
        self.display.terminal.write_line(text)

    def newline(self) -> None:
        self.display.terminal.newline()

    def clear_line(self) -> None:
        self.display.terminal.clear_line()

    def overwrite(self, text: str) -> None:
        """Replace the current line with text; prints a plain line when not on a terminal."""
        terminal = self.display.terminal
        if not terminal.is_interactive:
            terminal.write_line(text)
            return

        terminal.clear_line()
        terminal.write(text)
        terminal.prev_visible_length = visible_length(text)
        terminal.flush()

    # Colors & styles

    def colorize(self, text: str, fg: Optional[str] = None, bg: Optional[str] = None,
                 options: Optional[Iterable[str]] = None) -> str:
        """Colorize a string if ANSI is available; otherwise return it as-is."""
        return self.display.style.colorize(text, fg, bg, options)

    def println(self, text: str, fg: Optional[str] = None, bg: Optional[str] = None,
                options: Optional[Iterable[str]] = None) -> None:
        """Write a line with optional color and styles."""
        self.writeln(self.colorize(text, fg, bg, options))

    # Live block

    def begin_live(self, lines: int) -> None:
        """Reserve lines below the cursor for live updates."""
        self.display.live.begin(lines)

    def update_live(self, index: int, text: str) -> None:
        """Update the index-th line of the live block (0 = top)."""
        self.display.live.update(index, text)

    def finish_live(self, leave_content: bool = True) -> None:
        """Move the cursor below the live block and show it again."""
        self.display.live.finish(leave_content)

    @contextmanager
    def live(self, lines: int, leave_content: bool = True) -> Iterator[LiveBlock]:
        with self.display.live.live(lines, leave_content) as block:
            yield block

    # Utilities

    @staticmethod
    def strip_ansi(text: str) -> str:
        """Strip ANSI CSI sequences, e.g. for length calculations."""
        return strip_ansi(text)

    @staticmethod
    def visible_length(text: str) -> int:
        return visible_length(text)
