import pytest

SMALL_MAZE = """\
###############
#.......#....E#
#.#.###.#.###.#
#.....#.#...#.#
#.###.#####.#.#
#.#.#.......#.#
#.#.#####.###.#
#...........#.#
###.#.#####.#.#
#...#.....#.#.#
#.#.#.###.#.#.#
#.....#...#.#.#
#.###.#.#.#.#.#
#S..#.....#...#
###############
"""

LARGE_MAZE = """\
#################
#...#...#...#..E#
#.#.#.#.#.#.#.#.#
#.#.#.#...#...#.#
#.#.#.#.###.#.#.#
#...#.#.#.....#.#
#.#.#.#.#.#####.#
#.#...#.#.#.....#
#.#.#####.#.###.#
#.#.#.......#...#
#.#.###.#####.###
#.#.#...#.....#.#
#.#.#.#####.###.#
#.#.#.........#.#
#.#.#.#########.#
#S#.............#
#################
"""

# Two mirror-image routes around a wall; they merge one step before E.
MERGING_MAZE = """\
#####
#...#
#S#.E
#...#
#####
"""

# Two mirror-image routes that end at E with different facings.
SPLIT_END_MAZE = """\
.....
.S#E.
.....
"""


@pytest.fixture
def small_maze() -> str:
    return SMALL_MAZE


@pytest.fixture
def large_maze() -> str:
    return LARGE_MAZE


@pytest.fixture
def merging_maze() -> str:
    return MERGING_MAZE


@pytest.fixture
def split_end_maze() -> str:
    return SPLIT_END_MAZE
