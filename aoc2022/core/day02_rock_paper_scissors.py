"""Day 2: Rock Paper Scissors - score a strategy guide.

Invariants:
    - Shape points: rock 1, paper 2, scissors 3
    - Outcome points: loss 0, draw 3, win 6

Design Decisions:
    - Shapes as an IntEnum whose value is the shape score; the shape that beats
      s is (s % 3) + 1, so no lookup tables are needed
"""

from enum import IntEnum

from aoc2022.core.errors import PuzzleParseError


class Shape(IntEnum):
    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    def beaten_by(self) -> "Shape":
        return Shape(self % 3 + 1)

    def beats(self) -> "Shape":
        return Shape((self + 1) % 3 + 1)


_OPPONENT = {"A": Shape.ROCK, "B": Shape.PAPER, "C": Shape.SCISSORS}
_MINE = {"X": Shape.ROCK, "Y": Shape.PAPER, "Z": Shape.SCISSORS}


def parse_rounds(text: str) -> list[tuple[str, str]]:
    rounds = []
    for line in text.splitlines():
        if not line.strip():
            continue
        parts = line.split()
        if len(parts) != 2 or parts[0] not in _OPPONENT or parts[1] not in _MINE:
            raise PuzzleParseError("Expected '<A|B|C> <X|Y|Z>'", line)
        rounds.append((parts[0], parts[1]))
    return rounds


def round_score(opponent: Shape, me: Shape) -> int:
    """Points I obtain in a single round."""
    if opponent == me:
        return me + 3
    if me == opponent.beaten_by():
        return me + 6
    return int(me)


def choose_shape(opponent: Shape, outcome: str) -> Shape:
    """X means lose, Y draw, Z win."""
    if outcome == "X":
        return opponent.beats()
    if outcome == "Y":
        return opponent
    return opponent.beaten_by()


def solve_part_one(text: str) -> int:
    return sum(
        round_score(_OPPONENT[elf], _MINE[me]) for elf, me in parse_rounds(text)
    )


def solve_part_two(text: str) -> int:
    total = 0
    for elf, outcome in parse_rounds(text):
        opponent = _OPPONENT[elf]
        total += round_score(opponent, choose_shape(opponent, outcome))
    return total
