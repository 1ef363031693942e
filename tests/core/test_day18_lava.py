"""Day 18 tests - total and exterior surface area of the droplet."""

import pytest

from aoc2022.core.day18_lava import (
    parse_cubes, surface_area, exterior_surface_area, solve_part_one, solve_part_two,
)
from aoc2022.core.errors import PuzzleParseError

EXAMPLE = "\n".join([
    "2,2,2", "1,2,2", "3,2,2", "2,1,2", "2,3,2", "2,2,1", "2,2,3",
    "2,2,4", "2,2,6", "1,2,5", "3,2,5", "2,1,5", "2,3,5",
])


def test_two_adjacent_cubes():
    assert surface_area(parse_cubes("1,1,1\n2,1,1")) == 10


def test_part_one_example():
    assert solve_part_one(EXAMPLE) == 64


def test_part_two_example():
    assert solve_part_two(EXAMPLE) == 58


def test_hollow_shell_hides_its_inner_faces():
    shell = {
        (x, y, z)
        for x in range(3) for y in range(3) for z in range(3)
        if (x, y, z) != (1, 1, 1)
    }
    assert surface_area(shell) == 54 + 6
    assert exterior_surface_area(shell) == 54


def test_bad_coordinate_raises_parse_error():
    with pytest.raises(PuzzleParseError):
        parse_cubes("1,2")
