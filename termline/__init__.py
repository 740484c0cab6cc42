# __init__.py

from .config import TerminalConfig
from .logger import Logger
from .interface import Terminal
from .display import Capabilities, LiveState, strip_ansi, visible_length

__all__ = [
    "Terminal", "TerminalConfig", "Logger", "Capabilities", "LiveState",
    "strip_ansi", "visible_length",
]
