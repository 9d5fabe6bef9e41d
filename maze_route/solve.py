"""Top-level solve: minimal cost and the cells shared by all optimal routes."""
from __future__ import annotations

from dataclasses import dataclass

from maze_route.grid import MazeGrid, parse_grid
from maze_route.reconstruct import optimal_cells
from maze_route.search import search
from maze_route.types import Position, Weights


@dataclass(frozen=True)
class Solution:
    """Answer for one maze.

    Attributes:
        minimal_cost: Lowest total cost from Start to End.
        optimal_cells: Positions on at least one minimal-cost route.
    """

    minimal_cost: int
    optimal_cells: frozenset[Position]

    @property
    def optimal_cell_count(self) -> int:
        return len(self.optimal_cells)


def solve(
    maze: MazeGrid | str,
    weights: Weights | None = None,
    *,
    max_expansions: int | None = None,
) -> Solution:
    """Solve a maze given as a MazeGrid or as raw text.

    Raises MalformedGridError, UnreachableError or BudgetExceededError.
    """
    grid = parse_grid(maze) if isinstance(maze, str) else maze
    result = search(grid, weights, max_expansions=max_expansions)
    return Solution(
        minimal_cost=result.minimal_cost,
        optimal_cells=optimal_cells(result),
    )
