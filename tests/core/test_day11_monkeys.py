"""Day 11 tests - monkey parsing and both worry regimes."""

import pytest

from aoc2022.core.day11_monkeys import (
    parse_monkeys, play_rounds, solve_part_one, solve_part_two,
)
from aoc2022.core.errors import PuzzleParseError

EXAMPLE = """\
Monkey 0:
  Starting items: 79, 98
  Operation: new = old * 19
  Test: divisible by 23
    If true: throw to monkey 2
    If false: throw to monkey 3

Monkey 1:
  Starting items: 54, 65, 75, 74
  Operation: new = old + 6
  Test: divisible by 19
    If true: throw to monkey 2
    If false: throw to monkey 0

Monkey 2:
  Starting items: 79, 60, 97
  Operation: new = old * old
  Test: divisible by 13
    If true: throw to monkey 1
    If false: throw to monkey 3

Monkey 3:
  Starting items: 74
  Operation: new = old + 3
  Test: divisible by 17
    If true: throw to monkey 0
    If false: throw to monkey 1
"""


def test_parse_monkeys():
    monkeys = parse_monkeys(EXAMPLE)
    assert len(monkeys) == 4
    assert monkeys[1].items == [54, 65, 75, 74]
    assert monkeys[2].operand is None
    assert monkeys[3].divisor == 17


def test_first_relaxed_round_positions():
    monkeys = parse_monkeys(EXAMPLE)
    play_rounds(monkeys, 1, relaxed=True)
    assert monkeys[0].items == [20, 23, 27, 26]
    assert monkeys[1].items == [2080, 25, 167, 207, 401, 1046]
    assert monkeys[2].items == []


def test_part_one_example():
    assert solve_part_one(EXAMPLE) == 10605


def test_part_two_example():
    assert solve_part_two(EXAMPLE) == 2713310158


def test_inspection_counts_after_twenty_tense_rounds():
    monkeys = parse_monkeys(EXAMPLE)
    play_rounds(monkeys, 20, relaxed=False)
    assert [m.inspected for m in monkeys] == [99, 97, 8, 103]


def test_garbled_monkey_raises_parse_error():
    with pytest.raises(PuzzleParseError):
        parse_monkeys("Monkey 0:\n  Starting items: 1\n")


def _monkey(index: int, if_true: int, if_false: int, divisor: int = 3) -> str:
    return (
        f"Monkey {index}:\n"
        "  Starting items: 79\n"
        "  Operation: new = old * 19\n"
        f"  Test: divisible by {divisor}\n"
        f"    If true: throw to monkey {if_true}\n"
        f"    If false: throw to monkey {if_false}\n"
    )


def test_single_monkey_raises_parse_error():
    with pytest.raises(PuzzleParseError):
        parse_monkeys(_monkey(0, 0, 0))


@pytest.mark.parametrize("text", [
    _monkey(0, 7, 1) + "\n" + _monkey(1, 0, 0),
    _monkey(0, 1, 1) + "\n" + _monkey(1, 0, 1),
    _monkey(0, 1, 1, divisor=0) + "\n" + _monkey(1, 0, 0),
])
def test_bad_throw_target_or_divisor_raises_parse_error(text):
    with pytest.raises(PuzzleParseError):
        solve_part_one(text)
