"""Game state, moves, undo history and session saving."""

from __future__ import annotations

import enum
import random
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .field import EmptyCellError, Field
from .mapfile import FileReadError, map_filename, read_map
from .settings import MAP_DIR, SESSION_DIR, SETTINGS_PATH, Control, Meta, load_settings

GENERATED_CREATOR = "generated"


class Key(enum.Enum):
    """A key press, already decoded from the terminal."""

    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    W = enum.auto()
    A = enum.auto()
    S = enum.auto()
    D = enum.auto()
    BACK = enum.auto()
    HELP = enum.auto()
    QUIT = enum.auto()
    OTHER = enum.auto()


_ARROW_STEPS = {
    Key.UP: (-1, 0),
    Key.DOWN: (1, 0),
    Key.LEFT: (0, -1),
    Key.RIGHT: (0, 1),
}
_WASD_STEPS = {
    Key.W: (-1, 0),
    Key.S: (1, 0),
    Key.A: (0, -1),
    Key.D: (0, 1),
}
_STEPS_BY_CONTROL = {
    Control.ARROW: _ARROW_STEPS,
    Control.WASD: _WASD_STEPS,
    Control.COMMON: {**_ARROW_STEPS, **_WASD_STEPS},
}


@dataclass
class Session:
    """History and statistics of one game."""

    fields: list[Field] = field(default_factory=list)
    count: int = 0
    started: float = field(default_factory=time.time)
    elapsed: int = 0
    status: str = ""
    saved_as: Optional[Path] = None


def _empty_cell_for(n: int) -> str:
    return "_" if n <= 3 else "__"


def generate_solved(n: int) -> Field:
    """Build the solved ``n`` x ``n`` board with the empty cell at the bottom right."""
    empty_cell = _empty_cell_for(n)
    padded = n > 3
    numbers = iter(range(1, n * n))
    rows = []
    for i in range(n):
        row = []
        for j in range(n):
            if i == n - 1 and j == n - 1:
                row.append(empty_cell)
                continue
            number = next(numbers)
            row.append(f"_{number}" if padded and number <= 9 else str(number))
        rows.append(row)
    return Field(rows)


def shuffle_field(solved: Field, empty_cell: str, rng: Optional[random.Random] = None) -> Field:
    """Scramble ``solved`` with random legal moves of the empty cell."""
    rng = rng or random.Random()
    board = solved.copy()
    size = len(board.plain())
    position = board.find(empty_cell)
    if position is None:
        raise EmptyCellError(f"empty cell {empty_cell!r} not on the board")
    i, j = position
    steps = ((-1, 0), (1, 0), (0, -1), (0, 1))
    for _ in range(size * 20):
        di, dj = steps[rng.randrange(4)]
        ni, nj = i + di, j + dj
        if 0 <= ni < size and 0 <= nj < size:
            board.swap(empty_cell, ni, nj)
            i, j = ni, nj
    return board


class Game:
    """One game on a generated or loaded board."""

    def __init__(
        self,
        map_name: Optional[str] = None,
        backward_mode: bool = False,
        rng: Optional[random.Random] = None,
        settings_path: str = SETTINGS_PATH,
        map_dir: str = MAP_DIR,
        session_dir: str = SESSION_DIR,
    ) -> None:
        self.meta = load_settings(Meta(), settings_path)
        self.session_dir = Path(session_dir)

        if map_name is None:
            self.meta.empty_cell = _empty_cell_for(self.meta.n)
            self.meta.solved = generate_solved(self.meta.n)
            self.meta.current = shuffle_field(self.meta.solved, self.meta.empty_cell, rng)
            self.meta.creator = GENERATED_CREATOR
        else:
            path = Path(map_dir) / map_filename(map_name)
            try:
                with open(path, encoding="utf-8") as handle:
                    read_map(handle, self.meta)
            except OSError as exc:
                raise FileReadError(f"cannot open map {str(path)!r}") from exc

        self.meta.backward_mode = backward_mode
        self.session = Session(fields=[self.meta.current.copy()])

    @property
    def _mode(self) -> str:
        return "backward" if self.meta.backward_mode else "standart"

    def is_solved(self) -> bool:
        """Whether the current board equals the solved board."""
        return self.meta.current == self.meta.solved

    def backward(self) -> bool:
        """Undo the last move; return whether anything was undone."""
        if len(self.session.fields) <= 1:
            return False
        self.session.fields.pop()
        self.meta.current = self.session.fields[-1].copy()
        self.session.count = max(self.session.count - 1, 0)
        return True

    def move(self, key: Key) -> bool:
        """Move the empty cell as ``key`` asks; return whether the board changed.

        Keys that the configured control scheme does not use are ignored.
        """
        step = _STEPS_BY_CONTROL[self.meta.control].get(key)
        if step is None:
            return False
        position = self.meta.current.find(self.meta.empty_cell)
        if position is None:
            raise EmptyCellError(f"empty cell {self.meta.empty_cell!r} not on the board")
        empty_i, empty_j = position
        new_field = self.meta.current.copy()
        new_field.swap(self.meta.empty_cell, empty_i + step[0], empty_j + step[1])
        if new_field == self.meta.current:
            return False
        self.session.fields.append(new_field.copy())
        self.session.count += 1
        self.meta.current = new_field
        return True

    def handle_key(self, key: Key) -> bool:
        """Apply a move or undo key; return whether the board changed.

        Help and quit keys are left to the caller.
        """
        if key is Key.BACK:
            return self.backward() if self.meta.backward_mode else False
        return self.move(key)

    def render_board(self) -> str:
        """The move counter followed by the current board."""
        return f"Number of moves: {self.session.count}\n{self.meta.current}"

    def render_help(self) -> str:
        """The help screen with controls and map details."""
        return (
            "=== 15 PUZZLE ===\n"
            f"Control: {self.meta.control}\n"
            "ESC - help\n"
            f"Game mode: {self._mode}\n"
            "N - back moves (backward mode)\n"
            "Q - exit\n"
            "----------------\n"
            "MAP:\n"
            f"Creator: {self.meta.creator}\n"
            f"Empty Cell: {self.meta.empty_cell}\n"
            f"Solved State: \n{self.meta.solved}\n"
            "=================\n"
            "Click for exit"
        )

    def render_summary(self) -> str:
        """The end-of-game report."""
        saved = self.session.saved_as.name if self.session.saved_as else ""
        return (
            "Game is over!\n"
            f"Status: {self.session.status}\n"
            f"Mode: {self._mode}\n"
            f"Game time: {self.session.elapsed}\n"
            f"Number of moves: {self.session.count}\n"
            f"Game saved: {saved}"
        )

    def save(self) -> Path:
        """Write the session history to a new file and return its path."""
        path = self.session_dir / f"session_{int(time.time())}.txt"
        self.session.elapsed = int(time.time() - self.session.started)
        self.session.status = "true" if self.is_solved() else "false"

        lines = [
            f"Number of moves: {self.session.count}",
            f"Game time: {self.session.elapsed} seconds",
            f"Mode: {self._mode}",
            f"Game is over: {self.session.status}",
        ]
        for index, board in enumerate(self.session.fields):
            lines.append(f"#CURRENT_STATE {index}")
            lines.extend("".join(f"{cell}; " for cell in row) for row in board.plain())
            lines.append("=" * 20)

        try:
            with open(path, "w", encoding="utf-8") as out:
                out.write("\n".join(lines) + "\n")
        except OSError as exc:
            raise FileReadError(f"cannot write session file {str(path)!r}") from exc

        self.session.saved_as = path
        return path