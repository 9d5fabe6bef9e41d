"""Dijkstra search over the (position, facing) state graph, keeping every tied predecessor."""
from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

from maze_route.graph import successors
from maze_route.types import (
    BudgetExceededError,
    Direction,
    Position,
    State,
    UnreachableError,
    Weights,
)

if TYPE_CHECKING:
    from maze_route.grid import MazeGrid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult:
    """Frozen outcome of a completed search.

    Attributes:
        start_state: The state the search was seeded with (cost 0).
        end: Position of the End cell.
        best_cost: Minimal cumulative cost per discovered state.
        predecessors: States that reach each state at its minimal cost.
        expansions: Number of states expanded.
    """

    start_state: State
    end: Position
    best_cost: Mapping[State, int]
    predecessors: Mapping[State, frozenset[State]]
    expansions: int

    @property
    def reachable(self) -> bool:
        return any(State(self.end, d) in self.best_cost for d in Direction)

    @property
    def minimal_cost(self) -> int:
        """Lowest cost over all facings at the End cell. Raises UnreachableError."""
        costs = [
            self.best_cost[s]
            for s in (State(self.end, d) for d in Direction)
            if s in self.best_cost
        ]
        if not costs:
            raise UnreachableError(f"no route reaches end position {self.end}")
        return min(costs)

    def end_states(self) -> list[State]:
        """End states whose cost equals the minimal cost, in Direction order."""
        best = self.minimal_cost
        return [
            State(self.end, d)
            for d in Direction
            if self.best_cost.get(State(self.end, d)) == best
        ]


def search(
    grid: MazeGrid,
    weights: Weights | None = None,
    *,
    facing: Direction = Direction.EAST,
    max_expansions: int | None = None,
) -> SearchResult:
    """Run Dijkstra from the Start cell facing ``facing``.

    The search does not stop at the first End pop: it keeps expanding
    until the queue's lowest cost exceeds the best End cost found, so
    every End facing tied at the optimum and every tied predecessor is
    recorded. Stale heap entries are skipped on pop.

    Raises BudgetExceededError if more than ``max_expansions`` states
    would be expanded.
    """
    if weights is None:
        weights = Weights()
    if max_expansions is not None and max_expansions <= 0:
        raise ValueError(f"max_expansions must be > 0, got {max_expansions}")

    start = State(grid.start, facing)
    end = grid.end
    best_cost: dict[State, int] = {start: 0}
    predecessors: dict[State, set[State]] = {start: set()}
    open_set: list[tuple[int, int, State]] = [(0, 0, start)]
    counter = 1
    end_cost: int | None = None
    expansions = 0

    logger.debug("search %r from %s facing %s with %s", grid, grid.start, facing.name, weights)

    while open_set:
        cost, _, current = heapq.heappop(open_set)
        if cost > best_cost[current]:
            continue
        if end_cost is not None and cost > end_cost:
            logger.debug("pruned %d queued entries above end cost %d", len(open_set) + 1, end_cost)
            break
        if max_expansions is not None and expansions >= max_expansions:
            logger.debug("budget of %d expansions exhausted at cost %d", max_expansions, cost)
            raise BudgetExceededError(max_expansions, expansions, cost)
        expansions += 1

        for neighbor, weight in successors(grid, current, weights):
            candidate = cost + weight
            known = best_cost.get(neighbor)
            if known is None or candidate < known:
                best_cost[neighbor] = candidate
                predecessors[neighbor] = {current}
                heapq.heappush(open_set, (candidate, counter, neighbor))
                counter += 1
                if neighbor.position == end and (end_cost is None or candidate < end_cost):
                    end_cost = candidate
            elif candidate == known:
                # Already queued at this cost; merge without re-pushing.
                predecessors[neighbor].add(current)

    logger.debug(
        "search finished: %d expansions, %d states, end cost %s",
        expansions,
        len(best_cost),
        end_cost,
    )
    return SearchResult(
        start_state=start,
        end=end,
        best_cost=MappingProxyType(best_cost),
        predecessors=MappingProxyType({s: frozenset(p) for s, p in predecessors.items()}),
        expansions=expansions,
    )
