"""maze-route - Turn-weighted maze search with all-optimal-route reconstruction."""
from __future__ import annotations

from maze_route.types import (
    BudgetExceededError,
    CellKind,
    Direction,
    MalformedGridError,
    MazeError,
    OutOfBoundsError,
    Position,
    State,
    UnreachableError,
    Weights,
)
from maze_route.grid import MazeGrid, parse_grid
from maze_route.graph import successors
from maze_route.search import SearchResult, search
from maze_route.reconstruct import optimal_cells, optimal_states
from maze_route.solve import Solution, solve

__all__ = [
    "Position",
    "Direction",
    "State",
    "CellKind",
    "Weights",
    "MazeError",
    "MalformedGridError",
    "UnreachableError",
    "BudgetExceededError",
    "OutOfBoundsError",
    "MazeGrid",
    "parse_grid",
    "successors",
    "SearchResult",
    "search",
    "optimal_cells",
    "optimal_states",
    "Solution",
    "solve",
]
