# display/style/definitions.py

from typing import Dict, Iterable, List, Optional


def normalize_name(name: str) -> str:
    """Fold a color/style name so 'brightRed', 'bright_red' and 'BRIGHT-RED' match."""
    return name.replace('_', '').replace('-', '').lower()


class StyleDefinitions:
    """
    Static lookup tables from symbolic color and style names to SGR codes.
    Has no external dependencies.
    """

    # ANSI format utility
    FMT = staticmethod(lambda x: f'\033[{x}m')
    RESET = '\033[0m'

    FOREGROUND: Dict[str, int] = {
        'default': 39,
        'black': 30, 'red': 31, 'green': 32, 'yellow': 33,
        'blue': 34, 'magenta': 35, 'cyan': 36, 'white': 37,
        'gray': 90, 'brightRed': 91, 'brightGreen': 92, 'brightYellow': 93,
        'brightBlue': 94, 'brightMagenta': 95, 'brightCyan': 96, 'brightWhite': 97,
    }

    BACKGROUND: Dict[str, int] = {
        'default': 49,
        'black': 40, 'red': 41, 'green': 42, 'yellow': 43,
        'blue': 44, 'magenta': 45, 'cyan': 46, 'white': 47,
        'gray': 100, 'brightRed': 101, 'brightGreen': 102, 'brightYellow': 103,
        'brightBlue': 104, 'brightMagenta': 105, 'brightCyan': 106, 'brightWhite': 107,
    }

    OPTIONS: Dict[str, int] = {
        'bold': 1, 'dim': 2, 'underline': 4, 'blink': 5, 'reverse': 7, 'hidden': 8,
    }

    def __init__(self):
        """Build the case-folded lookup tables."""
        self._fg = {normalize_name(k): v for k, v in self.FOREGROUND.items()}
        self._bg = {normalize_name(k): v for k, v in self.BACKGROUND.items()}
        self._opts = {normalize_name(k): v for k, v in self.OPTIONS.items()}

    def get_foreground(self, name: Optional[str]) -> Optional[int]:
        """Return the foreground code for a color name, or None if unknown."""
        return self._fg.get(normalize_name(name)) if name else None

    def get_background(self, name: Optional[str]) -> Optional[int]:
        """Return the background code for a color name, or None if unknown."""
        return self._bg.get(normalize_name(name)) if name else None

    def get_option(self, name: Optional[str]) -> Optional[int]:
        """Return the code for a style option, or None if unknown."""
        return self._opts.get(normalize_name(name)) if name else None

    def get_codes(self, fg: Optional[str] = None, bg: Optional[str] = None,
                  options: Optional[Iterable[str]] = None) -> List[int]:
        """Collect recognized codes in fg, bg, options order; unknown names are skipped."""
        codes = [self.get_foreground(fg), self.get_background(bg)]
        codes.extend(self.get_option(opt) for opt in (options or ()))
        return [code for code in codes if code is not None]
