# display/capabilities.py
import os
import sys
from dataclasses import dataclass
from typing import Mapping, Optional, TextIO

from rich.console import detect_legacy_windows

STD_OUTPUT_HANDLE = -11
ENABLE_VIRTUAL_TERMINAL_PROCESSING = 0x0004


@dataclass(frozen=True)
class Capabilities:
    """What the output stream can safely receive."""

    interactive: bool
    ansi: bool


def is_interactive(stream: TextIO) -> bool:
    """Return True if the stream is attached to a terminal; assume True if unknown."""
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return True
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return True


def has_ansi_markers(environ: Mapping[str, str]) -> bool:
    """Check for environment variables set by ANSI-capable Windows terminal wrappers."""
    return (
        "ANSICON" in environ
        or environ.get("ConEmuANSI") == "ON"
        or bool(environ.get("WT_SESSION"))
    )


def _request_vt_processing() -> bool:
    """Ask the Windows console to interpret VT sequences on stdout."""
    import ctypes

    kernel32 = ctypes.windll.kernel32
    handle = kernel32.GetStdHandle(STD_OUTPUT_HANDLE)
    mode = ctypes.c_uint32()
    if not kernel32.GetConsoleMode(handle, ctypes.byref(mode)):
        return False
    if not kernel32.SetConsoleMode(handle, mode.value | ENABLE_VIRTUAL_TERMINAL_PROCESSING):
        return False
    # Confirm the console now reports VT support
    return not detect_legacy_windows()


def _windows_ansi_support(environ: Mapping[str, str]) -> bool:
    try:
        if _request_vt_processing():
            return True
    except (AttributeError, ImportError, OSError):
        pass  # no console API available; rely on the environment
    return has_ansi_markers(environ)


def detect_capabilities(
    stream: TextIO,
    platform: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
    interactive: Optional[bool] = None,
    ansi: Optional[bool] = None,
) -> Capabilities:
    """
    Probe the output stream once.

    Args:
        stream: Text stream output is written to
        platform: Platform name, defaults to sys.platform
        environ: Environment mapping, defaults to os.environ
        interactive: Force the interactivity flag instead of probing
        ansi: Force ANSI support instead of probing

    Escape sequences are never enabled on a non-interactive stream so
    redirected output stays clean.
    """
    platform = platform or sys.platform
    environ = os.environ if environ is None else environ

    if interactive is None:
        interactive = is_interactive(stream)

    if ansi is None:
        ansi = _windows_ansi_support(environ) if platform == "win32" else True

    return Capabilities(interactive=interactive, ansi=ansi and interactive)
