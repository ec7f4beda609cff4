"""Restore the terminal after questionary/prompt_toolkit prompts.

prompt_toolkit can leave echo off or the console in raw mode when a prompt
is interrupted. The scaffolding tool and any later input() need a sane tty.
"""

import logging
import subprocess
import sys

logger = logging.getLogger(__name__)


def reset_terminal() -> None:
    """Put stdin back into line + echo mode. No-op when stdin is not a tty."""
    if not sys.stdin.isatty():
        return

    if sys.platform == "win32":
        _reset_windows_console()
    else:
        _reset_posix_tty()


def _reset_windows_console() -> None:
    import ctypes

    enable_processed_input = 0x0001
    enable_line_input = 0x0002
    enable_echo_input = 0x0004
    try:
        kernel32 = ctypes.windll.kernel32  # type: ignore[attr-defined]
        handle = kernel32.GetStdHandle(-10)  # STD_INPUT_HANDLE
        if handle is None or handle == -1:
            return
        mode = ctypes.c_ulong()
        if kernel32.GetConsoleMode(handle, ctypes.byref(mode)) == 0:
            return
        kernel32.SetConsoleMode(
            handle,
            mode.value | enable_line_input | enable_echo_input | enable_processed_input,
        )
    except (AttributeError, OSError) as e:
        logger.debug("Console mode reset failed: %s", e)


def _reset_posix_tty() -> None:
    try:
        subprocess.run(["stty", "sane"], stdin=sys.stdin, capture_output=True, timeout=2)
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("stty sane failed: %s", e)
