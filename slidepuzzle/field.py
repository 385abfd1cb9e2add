"""The square puzzle board."""

from __future__ import annotations

from typing import Optional, Sequence


class FieldError(Exception):
    """The board is empty or not square."""


class MoveError(Exception):
    """The chosen cell is not next to the empty cell."""


class EmptyCellError(Exception):
    """The empty-cell marker is not on the board."""


class Field:
    """A square grid of string cells."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, plain: Optional[Sequence[Sequence[str]]] = None) -> None:
        if plain is None:
            self._cells: list[list[str]] = []
            return
        if not plain or not plain[0]:
            raise FieldError("board must not be empty")
        size = len(plain)
        if any(not row or len(row) != size for row in plain):
            raise FieldError("board must be square")
        self._cells = [list(row) for row in plain]

    def plain(self) -> list[list[str]]:
        """Return a copy of the cells, row by row."""
        return [row[:] for row in self._cells]

    def find(self, target: str) -> Optional[tuple[int, int]]:
        """Return the position of the first cell equal to ``target``, or None."""
        for i, row in enumerate(self._cells):
            for j, cell in enumerate(row):
                if cell == target:
                    return i, j
        return None

    def swap(self, target: str, i: int, j: int) -> None:
        """Swap cell ``(i, j)`` with the cell holding ``target``.

        Positions outside the board are ignored. A cell that is not
        orthogonally adjacent to ``target`` raises MoveError.
        """
        if i < 0 or i >= len(self._cells) or j < 0 or j >= len(self._cells[i]):
            return
        position = self.find(target)
        if position is None:
            raise EmptyCellError(f"cell {target!r} not found")
        empty_i, empty_j = position
        adjacent = (i == empty_i and abs(j - empty_j) == 1) or (
            j == empty_j and abs(i - empty_i) == 1
        )
        if not adjacent:
            raise MoveError(f"cell ({i}, {j}) is not next to the empty cell")
        cells = self._cells
        cells[i][j], cells[empty_i][empty_j] = cells[empty_i][empty_j], cells[i][j]

    def max_length(self) -> int:
        """Length of the longest cell text."""
        return max((len(cell) for row in self._cells for cell in row), default=0)

    def copy(self) -> "Field":
        """Return an independent copy of this board."""
        clone = Field()
        clone._cells = self.plain()
        return clone

    def __str__(self) -> str:
        width = self.max_length()
        return "".join(
            "".join(f"{cell:<{width}} " for cell in row) + "\n" for row in self._cells
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Field):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Field({self._cells!r})"