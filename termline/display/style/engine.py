# display/style/engine.py

import re
from typing import Iterable, Optional

from .definitions import StyleDefinitions

# ESC '[' parameter bytes, intermediate bytes, one final byte
ANSI_CSI_RE = re.compile(r'\x1B\[[0-9;?]*[ -/]*[@-~]')


def strip_ansi(text: str) -> str:
    """Remove ANSI CSI sequences from text."""
    return ANSI_CSI_RE.sub('', text)


def visible_length(text: str) -> int:
    """Return the length of text without ANSI codes.

    Counts code points, so wide characters are measured as one cell.
    """
    return len(strip_ansi(text))


class StyleEngine:
    """
    Applies colors and text styles, emitting escapes only when the session
    allows them.
    """
    def __init__(self, definitions: StyleDefinitions, ansi_enabled: bool):
        self.definitions = definitions
        self.ansi_enabled = ansi_enabled

    def colorize(self, text: str, fg: Optional[str] = None, bg: Optional[str] = None,
                 options: Optional[Iterable[str]] = None) -> str:
        """
        Wrap text in a set-attributes / reset pair.

        Returns text unchanged when ANSI is disabled or no recognized
        color or option was given.
        """
        if not self.ansi_enabled:
            return text
        codes = self.definitions.get_codes(fg, bg, options)
        if not codes:
            return text
        return self.definitions.FMT(';'.join(map(str, codes))) + text + self.definitions.RESET

    def get_visible_length(self, text: str) -> int:
        return visible_length(text)
