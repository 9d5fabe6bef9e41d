"""MazeGrid - immutable rectangular map of cell kinds."""
from __future__ import annotations

from typing import Iterable, Sequence

from maze_route.types import CellKind, MalformedGridError, OutOfBoundsError, Position


class MazeGrid:
    """Rectangular grid with exactly one Start and one End cell.

    Rows are copied into tuples on construction and never change.
    Validation happens here, so a constructed grid is always well formed.
    """

    def __init__(self, rows: Iterable[Sequence[CellKind]]) -> None:
        self._rows: tuple[tuple[CellKind, ...], ...] = tuple(tuple(r) for r in rows)
        if not self._rows or not self._rows[0]:
            raise MalformedGridError("grid is empty")
        self._height = len(self._rows)
        self._width = len(self._rows[0])
        for i, row in enumerate(self._rows):
            if len(row) != self._width:
                raise MalformedGridError(
                    f"row {i} has length {len(row)}, expected {self._width}"
                )
        self._start = self._find_unique(CellKind.START)
        self._end = self._find_unique(CellKind.END)

    @classmethod
    def from_text(cls, text: str) -> MazeGrid:
        return parse_grid(text)

    def _find_unique(self, kind: CellKind) -> Position:
        found = [
            (r, c)
            for r, row in enumerate(self._rows)
            for c, cell in enumerate(row)
            if cell is kind
        ]
        if len(found) != 1:
            raise MalformedGridError(
                f"expected exactly one {kind.name} cell, found {len(found)}"
            )
        return found[0]

    # --- Properties ---

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    @property
    def start(self) -> Position:
        return self._start

    @property
    def end(self) -> Position:
        return self._end

    # --- Queries ---

    def in_bounds(self, position: Position) -> bool:
        row, col = position
        return 0 <= row < self._height and 0 <= col < self._width

    def cell_at(self, position: Position) -> CellKind:
        """Return the cell kind at a position. Raises OutOfBoundsError outside the grid."""
        if not self.in_bounds(position):
            raise OutOfBoundsError(position, self._height, self._width)
        return self._rows[position[0]][position[1]]

    def passable(self, position: Position) -> bool:
        """True if the position is inside the grid and not a wall."""
        return self.in_bounds(position) and self.cell_at(position).passable

    def positions(self) -> list[Position]:
        return [(r, c) for r in range(self._height) for c in range(self._width)]

    # --- Derivation ---

    def with_cell(self, position: Position, kind: CellKind) -> MazeGrid:
        """Return a copy of this grid with one cell replaced.

        The copy is validated like any other grid, so moving a marker
        without removing the old one raises MalformedGridError.
        """
        if not self.in_bounds(position):
            raise OutOfBoundsError(position, self._height, self._width)
        row, col = position
        rows = [list(r) for r in self._rows]
        rows[row][col] = kind
        return MazeGrid(rows)

    def to_text(self) -> str:
        return "\n".join("".join(cell.value for cell in row) for row in self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MazeGrid):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"MazeGrid({self._height}x{self._width}, start={self._start}, end={self._end})"


def parse_grid(text: str) -> MazeGrid:
    """Parse a block of ``#``, ``.``, ``S`` and ``E`` characters into a MazeGrid.

    Trailing blank lines are ignored. Raises MalformedGridError on unknown
    characters, ragged rows, or a Start/End count other than one.
    """
    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()

    rows: list[list[CellKind]] = []
    for r, line in enumerate(lines):
        row: list[CellKind] = []
        for c, char in enumerate(line):
            try:
                row.append(CellKind(char))
            except ValueError:
                raise MalformedGridError(
                    f"unknown cell character {char!r} at row {r}, column {c}"
                ) from None
        rows.append(row)
    return MazeGrid(rows)
