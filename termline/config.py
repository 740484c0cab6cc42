# config.py

import sys
from dataclasses import dataclass, field
from typing import Optional, TextIO


@dataclass
class TerminalConfig:
    """
    Settings for a Terminal session.

    Args:
        stream: Output stream; sys.stdout at construction time if omitted
        interactive: Force the interactivity flag instead of probing the stream
        ansi: Force ANSI support instead of probing; still off when not interactive
        logging_enabled: Enable debug logging
        log_file: Path to log file. Use "-" for stderr.
    """

    stream: Optional[TextIO] = field(default=None)
    interactive: Optional[bool] = None
    ansi: Optional[bool] = None
    logging_enabled: bool = False
    log_file: Optional[str] = None

    def __post_init__(self):
        if self.stream is None:
            self.stream = sys.stdout
