"""Reading puzzle maps from text."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from .field import EmptyCellError, Field
from .settings import MAP_DIR, Meta
from .textutil import split, strip


class FileReadError(Exception):
    """A map or session file could not be opened."""


def read_map(lines: Iterable[str], meta: Meta) -> Meta:
    """Fill ``meta`` from map lines and return it.

    Raises FieldError for a malformed board and EmptyCellError when the
    empty-cell marker is missing from either board.
    """
    current: list[list[str]] = []
    solved: list[list[str]] = []
    active: Optional[list[list[str]]] = None

    for raw in lines:
        line = raw.rstrip("\r\n")
        if not line:
            continue
        if line.startswith("REM current"):
            active = current
        elif line.startswith("REM solved"):
            active = solved
        elif line.startswith("REM "):
            active = None
        elif line.startswith("#EMPTY"):
            meta.empty_cell = strip(line[7:])
        elif line.startswith("#CREATOR"):
            meta.creator = strip(line[9:])
        elif active is not None:
            active.append(split(line, ";"))

    meta.current = Field(current)
    meta.solved = Field(solved)

    if meta.solved.find(meta.empty_cell) is None or meta.current.find(meta.empty_cell) is None:
        raise EmptyCellError(f"empty cell {meta.empty_cell!r} not on the board")
    return meta


def map_filename(name: str) -> str:
    """Add the ``.txt`` extension unless the name already contains it."""
    return name if ".txt" in name else name + ".txt"


def map_exists(name: str, map_dir: str = MAP_DIR) -> bool:
    """Whether the named map can be opened from ``map_dir``."""
    try:
        with open(Path(map_dir) / map_filename(name), encoding="utf-8"):
            return True
    except OSError:
        return False