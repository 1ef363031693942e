"""Day 12 tests - shortest climbs on the heightmap."""

import pytest

from aoc2022.core.day12_hill_climb import (
    parse_heightmap, solve_part_one, solve_part_two,
)
from aoc2022.core.errors import PuzzleParseError, NoSolutionError

EXAMPLE = "Sabqponm\nabcryxxl\naccszExk\nacctuvwj\nabdefghi"


def test_parse_marks_start_and_exit():
    hmap = parse_heightmap(EXAMPLE)
    assert hmap.start == (0, 0)
    assert hmap.exit == (2, 5)
    assert hmap.heights[2][5] == 25


def test_part_one_example():
    assert solve_part_one(EXAMPLE) == 31


def test_part_two_example():
    assert solve_part_two(EXAMPLE) == 29


def test_unreachable_exit_raises_no_solution():
    with pytest.raises(NoSolutionError):
        solve_part_one("SaE")


def test_missing_exit_raises_parse_error():
    with pytest.raises(PuzzleParseError):
        parse_heightmap("Sabc")
