"""Shared types, weights and errors for maze-route."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Position = tuple[int, int]


class Direction(Enum):
    """Facing direction as a (d_row, d_col) unit vector."""

    NORTH = (-1, 0)
    EAST = (0, 1)
    SOUTH = (1, 0)
    WEST = (0, -1)

    def clockwise(self) -> Direction:
        return _CLOCKWISE[self]

    def counterclockwise(self) -> Direction:
        return _COUNTERCLOCKWISE[self]

    def step(self, position: Position) -> Position:
        d_row, d_col = self.value
        return (position[0] + d_row, position[1] + d_col)


_ORDER = [Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST]
_CLOCKWISE = {d: _ORDER[(i + 1) % 4] for i, d in enumerate(_ORDER)}
_COUNTERCLOCKWISE = {d: _ORDER[(i - 1) % 4] for i, d in enumerate(_ORDER)}


class CellKind(Enum):
    """Kind of a grid cell, valued by its input character."""

    OPEN = "."
    WALL = "#"
    START = "S"
    END = "E"

    @property
    def passable(self) -> bool:
        return self is not CellKind.WALL


@dataclass(frozen=True, slots=True)
class State:
    """A search node: where the walker stands and which way it faces."""

    position: Position
    direction: Direction


@dataclass(frozen=True)
class Weights:
    """Edge weights of the state graph.

    Attributes:
        move_cost: Cost of one step forward (must be > 0).
        turn_cost: Cost of one 90 degree rotation (must be > 0).
    """

    move_cost: int = 1
    turn_cost: int = 1000

    def __post_init__(self) -> None:
        for name in ("move_cost", "turn_cost"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an int, got {value!r}")
            if value <= 0:
                raise ValueError(f"{name} must be > 0, got {value}")


class MazeError(Exception):
    """Base class for maze-route errors."""


class MalformedGridError(MazeError):
    """Raised when input is not a rectangular grid with one Start and one End."""


class UnreachableError(MazeError):
    """Raised when no route from Start to End exists."""


class BudgetExceededError(MazeError):
    """Raised when a search runs out of its expansion budget.

    The answer is unknown rather than absent. ``frontier_cost`` is the
    cost of the last state expanded before the abort.
    """

    def __init__(self, max_expansions: int, expansions: int, frontier_cost: int) -> None:
        self.max_expansions = max_expansions
        self.expansions = expansions
        self.frontier_cost = frontier_cost
        super().__init__(
            f"search exceeded budget of {max_expansions} expansions "
            f"(frontier at cost {frontier_cost})"
        )


class OutOfBoundsError(MazeError, IndexError):
    """Raised when a position outside the grid is looked up."""

    def __init__(self, position: Position, height: int, width: int) -> None:
        self.position = position
        super().__init__(f"{position} out of bounds for {height}x{width} grid")
