import os, logging
from typing import Optional
from functools import partial

from rich.console import Console
from rich.logging import RichHandler

class Logger:
    def __init__(self, name: str, logging_enabled: bool = False, log_file: Optional[str] = None):
        self._logger = logging.getLogger(name)
        configured = [h for h in self._logger.handlers if not isinstance(h, logging.NullHandler)]
        if logging_enabled and not configured:
            self._logger.addHandler(self._create_handler(log_file))
            self._logger.setLevel(logging.DEBUG)
        elif not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

        # Dynamically create logging methods
        for level in ['debug', 'info', 'warning', 'error']:
            setattr(self, level, partial(self._log, level))

    @staticmethod
    def _create_handler(log_file: Optional[str]) -> logging.Handler:
        if log_file == '-':
            # stderr, so records never land in the stream being drawn on
            return RichHandler(console=Console(stderr=True), show_path=False)
        if log_file is None:
            log_file = os.path.join(os.getcwd(), 'logs', 'termline_debug.log')
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        handler = logging.FileHandler(log_file)
        handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
        return handler

    def _log(self, level: str, msg: str, exc_info: Optional[bool] = None) -> None:
        getattr(self._logger, level)(msg, exc_info=exc_info)
