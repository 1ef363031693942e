"""Day 2 tests - strategy guide scoring under both readings."""

import pytest

from aoc2022.core.day02_rock_paper_scissors import (
    Shape, round_score, choose_shape, solve_part_one, solve_part_two,
)
from aoc2022.core.errors import PuzzleParseError

EXAMPLE = "A Y\nB X\nC Z"


def test_part_one_example():
    assert solve_part_one(EXAMPLE) == 15


def test_part_two_example():
    assert solve_part_two(EXAMPLE) == 12


def test_round_score_covers_win_draw_loss():
    assert round_score(Shape.ROCK, Shape.PAPER) == 8
    assert round_score(Shape.SCISSORS, Shape.SCISSORS) == 6
    assert round_score(Shape.PAPER, Shape.ROCK) == 1


def test_choose_shape_for_each_outcome():
    assert choose_shape(Shape.ROCK, "X") == Shape.SCISSORS
    assert choose_shape(Shape.ROCK, "Y") == Shape.ROCK
    assert choose_shape(Shape.ROCK, "Z") == Shape.PAPER


def test_unknown_symbol_raises_parse_error():
    with pytest.raises(PuzzleParseError):
        solve_part_one("A Q")
