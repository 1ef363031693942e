"""Day 14 tests - falling sand with and without a floor."""

import pytest

from aoc2022.core.day14_sand import parse_rocks, pour_sand, solve_part_one, solve_part_two
from aoc2022.core.errors import PuzzleParseError

EXAMPLE = "498,4 -> 498,6 -> 496,6\n503,4 -> 502,4 -> 502,9 -> 494,9"


def test_parse_draws_rock_lines():
    rocks = parse_rocks(EXAMPLE)
    assert {(498, 4), (498, 5), (498, 6), (497, 6), (496, 6)} <= rocks
    assert (494, 9) in rocks
    assert len(rocks) == 20


def test_part_one_example():
    assert solve_part_one(EXAMPLE) == 24


def test_part_two_example():
    assert solve_part_two(EXAMPLE) == 93


def test_single_rock_cell_holds_nothing_without_floor():
    assert pour_sand(parse_rocks("500,5 -> 500,5"), floor=False) == 0


def test_floor_stops_sand_even_without_rocks_below_source():
    # floor at y = 7, the pile fills the triangle under the source
    assert pour_sand(parse_rocks("0,5 -> 0,5"), floor=True) == 49


def test_malformed_path_raises_parse_error():
    with pytest.raises(PuzzleParseError):
        parse_rocks("498,4 -> 498")
