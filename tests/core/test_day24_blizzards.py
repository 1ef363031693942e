"""Day 24 tests - crossing the blizzard valley."""

import pytest

from aoc2022.core.day24_blizzards import (
    parse_valley, crossing_time, solve_part_one, solve_part_two,
)
from aoc2022.core.errors import PuzzleParseError, NoSolutionError

EXAMPLE = "\n".join([
    "#.######",
    "#>>.<^<#",
    "#.<..<<#",
    "#>v.><>#",
    "#<^v^^>#",
    "######.#",
])


def test_parse_valley():
    valley = parse_valley(EXAMPLE)
    assert (valley.height, valley.width) == (4, 6)
    assert valley.start == (-1, 0)
    assert valley.goal == (4, 5)
    assert (0, 0) in valley.blizzards[">"]


def test_blizzards_wrap():
    valley = parse_valley("#.###\n#>..#\n###.#")
    assert not valley.is_free((0, 0), 0)
    assert valley.is_free((0, 0), 1)
    assert not valley.is_free((0, 1), 1)
    assert not valley.is_free((0, 0), 3)


def test_part_one_example():
    assert solve_part_one(EXAMPLE) == 18


def test_part_two_example():
    assert solve_part_two(EXAMPLE) == 54


def test_empty_valley_walks_straight_through():
    valley = parse_valley("#.##\n#..#\n#..#\n##.#")
    assert crossing_time(valley, valley.start, valley.goal, 0) == 4


def test_blocked_valley_raises_no_solution():
    # The only cell is under a blizzard every minute
    valley = parse_valley("#.#\n#>#\n#.#")
    with pytest.raises(NoSolutionError):
        crossing_time(valley, valley.start, valley.goal, 0)


def test_missing_exit_raises_parse_error():
    with pytest.raises(PuzzleParseError):
        parse_valley("#.##\n#..#\n####")
