"""Successor function of the implicit (position, facing) state graph."""
from __future__ import annotations

from typing import TYPE_CHECKING

from maze_route.types import State, Weights

if TYPE_CHECKING:
    from maze_route.grid import MazeGrid


def successors(grid: MazeGrid, state: State, weights: Weights) -> list[tuple[State, int]]:
    """Return the up to three (state, weight) edges leaving ``state``.

    Moving forward is included only onto an in-bounds, non-wall cell.
    Both rotations are always included.
    """
    result: list[tuple[State, int]] = []
    ahead = state.direction.step(state.position)
    if grid.passable(ahead):
        result.append((State(ahead, state.direction), weights.move_cost))
    result.append((State(state.position, state.direction.clockwise()), weights.turn_cost))
    result.append(
        (State(state.position, state.direction.counterclockwise()), weights.turn_cost)
    )
    return result
