"""Game settings and the shared game metadata."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable

from .field import Field

SESSION_DIR = "sessions/"
SETTINGS_PATH = "settings/config.txt"
MAP_DIR = "maps/"


class Control(enum.Enum):
    """Which keys move the tiles."""

    COMMON = enum.auto()
    ARROW = enum.auto()
    WASD = enum.auto()

    def __str__(self) -> str:
        return self.name


@dataclass
class Meta:
    """Everything known about the current map and how it is played."""

    current: Field = field(default_factory=Field)
    solved: Field = field(default_factory=Field)
    creator: str = ""
    empty_cell: str = ""
    backward_mode: bool = False
    control: Control = Control.COMMON
    n: int = 3


def parse_settings(lines: Iterable[str], meta: Meta) -> Meta:
    """Apply settings lines to ``meta`` and return it.

    A ``ctrl`` line naming neither ``wasd`` nor ``>`` stops reading.
    """
    for raw in lines:
        line = raw.rstrip("\r\n")
        if not line or line.startswith("REM"):
            continue
        if "ctrl" in line:
            if "wasd" in line:
                meta.control = Control.WASD
            elif ">" in line:
                meta.control = Control.ARROW
            else:
                break
        elif "dim" in line:
            for char in line[3:]:
                if char == " ":
                    continue
                if "0" <= char <= "9":
                    meta.n = int(char)
                break
    return meta


def load_settings(meta: Meta, path: str = SETTINGS_PATH) -> Meta:
    """Read settings from ``path`` into ``meta``; a missing file changes nothing."""
    try:
        with open(path, encoding="utf-8") as handle:
            return parse_settings(handle, meta)
    except OSError:
        return meta