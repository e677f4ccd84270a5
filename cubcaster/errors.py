"""Error type and error reporting for the game."""

from __future__ import annotations

import sys
from typing import TextIO

ANSI_COLOR_RESET = "\033[0m"
ANSI_COLOR_BLACK = "\033[30m"
ANSI_COLOR_RED = "\033[31m"
ANSI_COLOR_GREEN = "\033[32m"
ANSI_COLOR_YELLOW = "\033[33m"
ANSI_COLOR_BLUE = "\033[34m"
ANSI_COLOR_MAGENTA = "\033[35m"
ANSI_COLOR_CYAN = "\033[36m"
ANSI_COLOR_WHITE = "\033[37m"

CUB3D_USAGE = "usage ./cub3d [/path/to/map.cub]!"
ERR_INVALID_FILENAME = "The map file must be ending with .cub!"
ERR_NO_PLAYER = "No player found!"


class Cub3dError(Exception):
    """A fatal error in setting up or running the game."""


def error_message(msg: str) -> str:
    """Return the coloured error report for ``msg``."""
    return f"{ANSI_COLOR_RED}Error\n{ANSI_COLOR_RESET}{msg}\n"


def report_error(msg: str, stream: TextIO | None = None) -> int:
    """Write the error report to ``stream`` (stderr by default); return the exit status."""
    target = sys.stderr if stream is None else stream
    target.write(error_message(msg))
    return 1