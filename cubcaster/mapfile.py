"""Reading map files into a mutable character grid."""

from __future__ import annotations

import os
from collections.abc import Iterator

from .errors import ERR_INVALID_FILENAME, Cub3dError

Grid = list[list[str]]


def read_lines(file_name: str | os.PathLike[str]) -> Iterator[str]:
    """Yield the lines of a file, each ending with its newline if it had one."""
    try:
        handle = open(file_name, "rb")
    except OSError as exc:
        raise Cub3dError(f"{os.fspath(file_name)}: {exc.strerror}") from exc
    with handle:
        for raw in handle:
            yield raw.decode("utf-8", errors="replace")


def parse_map(file_name: str | os.PathLike[str]) -> Grid:
    """Read a map file into a grid of rows of characters, newlines removed."""
    rows = []
    for line in read_lines(file_name):
        if line.endswith("\n"):
            line = line[:-1]
        rows.append(list(line))
    return rows


def check_map_filename(file_name: str) -> str:
    """Return ``file_name`` if it ends with ``.cub``; raise otherwise."""
    if not file_name.endswith(".cub"):
        raise Cub3dError(ERR_INVALID_FILENAME)
    return file_name