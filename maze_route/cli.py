"""Command line entry point: solve a maze file and print both answers.

Run: python -m maze_route path/to/maze.txt
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from maze_route.grid import parse_grid
from maze_route.solve import solve
from maze_route.types import (
    BudgetExceededError,
    MalformedGridError,
    UnreachableError,
    Weights,
)

EXIT_UNREACHABLE = 1
EXIT_MALFORMED = 2
EXIT_BUDGET = 3


def _setup_logging(verbose: bool) -> None:
    # No-op when the root logger already has handlers.
    logging.basicConfig(format="%(levelname)s:%(name)s:%(message)s")
    logging.getLogger("maze_route").setLevel(logging.DEBUG if verbose else logging.WARNING)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="maze_route",
        description="Lowest turn-weighted cost through a maze, and the cells on all best routes",
    )
    parser.add_argument("path", type=Path, help="maze file of '#', '.', 'S' and 'E'")
    parser.add_argument("--move-cost", type=int, default=1,
                        help="cost of one step forward (default: 1)")
    parser.add_argument("--turn-cost", type=int, default=1000,
                        help="cost of one 90 degree turn (default: 1000)")
    parser.add_argument("--max-expansions", type=int, default=None,
                        help="abort after this many expanded states (default: unlimited)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="log search progress to stderr")
    args = parser.parse_args(argv)

    _setup_logging(args.verbose)

    try:
        weights = Weights(move_cost=args.move_cost, turn_cost=args.turn_cost)
    except ValueError as exc:
        parser.error(str(exc))
    if args.max_expansions is not None and args.max_expansions <= 0:
        parser.error(f"--max-expansions must be > 0, got {args.max_expansions}")

    try:
        text = args.path.read_text()
    except OSError as exc:
        print(f"error: cannot read {args.path}: {exc}", file=sys.stderr)
        return EXIT_MALFORMED

    try:
        solution = solve(parse_grid(text), weights, max_expansions=args.max_expansions)
    except MalformedGridError as exc:
        print(f"error: malformed maze: {exc}", file=sys.stderr)
        return EXIT_MALFORMED
    except UnreachableError as exc:
        print(f"error: unreachable: {exc}", file=sys.stderr)
        return EXIT_UNREACHABLE
    except BudgetExceededError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_BUDGET

    print(f"minimal cost: {solution.minimal_cost}")
    print(f"optimal cells: {solution.optimal_cell_count}")
    return 0
