"""Backward walk over predecessor sets to collect every cell on an optimal route."""
from __future__ import annotations

from typing import TYPE_CHECKING

from maze_route.types import Position, State

if TYPE_CHECKING:
    from maze_route.search import SearchResult


def optimal_states(result: SearchResult) -> frozenset[State]:
    """Return every state lying on at least one minimum-cost route.

    Walks the predecessor sets backward from all End states tied at the
    minimal cost with an explicit stack. Each state is visited once, so
    shared ancestry of several End facings is walked a single time.
    Raises UnreachableError when no route exists.
    """
    stack = result.end_states()
    visited: set[State] = set(stack)
    while stack:
        state = stack.pop()
        for parent in result.predecessors.get(state, ()):
            if parent not in visited:
                visited.add(parent)
                stack.append(parent)
    return frozenset(visited)


def optimal_cells(result: SearchResult) -> frozenset[Position]:
    """Union of positions (facing dropped) over all minimum-cost routes."""
    return frozenset(state.position for state in optimal_states(result))
