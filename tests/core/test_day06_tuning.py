"""Day 6 tests - start-of-packet and start-of-message markers."""

import pytest

from aoc2022.core.day06_tuning import detect_marker, solve_part_one, solve_part_two
from aoc2022.core.errors import NoSolutionError


@pytest.mark.parametrize("signal, packet, message", [
    ("mjqjpqmgbjljsphdztnvjfqwrcgsmlb", 7, 19),
    ("bvwbjplbgvbhsrlpgdmjqwftvncz", 5, 23),
    ("nppdvjthqldpwncqszvftbrmjlhg", 6, 23),
    ("nznrnfrfntjfmvfwmzdfjlvtqnbhcprsg", 10, 29),
    ("zcfzfwzzqfrljwzlrfnpqdbhtmscgvjw", 11, 26),
])
def test_examples(signal, packet, message):
    assert solve_part_one(signal) == packet
    assert solve_part_two(signal) == message


def test_marker_at_the_very_end_is_found():
    assert detect_marker("aaaabcd", 4) == 7


def test_missing_marker_raises_no_solution():
    with pytest.raises(NoSolutionError):
        detect_marker("abababab", 4)
