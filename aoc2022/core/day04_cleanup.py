"""Day 4: Camp Cleanup - overlapping section assignments."""

import re

from aoc2022.core.errors import PuzzleParseError

_PAIR = re.compile(r"^(\d+)-(\d+),(\d+)-(\d+)$")

Sections = tuple[int, int]


def parse_pairs(text: str) -> list[tuple[Sections, Sections]]:
    pairs = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        match = _PAIR.match(line)
        if match is None:
            raise PuzzleParseError("Expected 'a-b,c-d'", line)
        a, b, c, d = (int(x) for x in match.groups())
        pairs.append(((a, b), (c, d)))
    return pairs


def fully_overlaps(first: Sections, second: Sections) -> bool:
    return (first[0] <= second[0] and first[1] >= second[1]) or (
        second[0] <= first[0] and second[1] >= first[1]
    )


def overlaps(first: Sections, second: Sections) -> bool:
    return first[0] <= second[1] and second[0] <= first[1]


def solve_part_one(text: str) -> int:
    return sum(1 for a, b in parse_pairs(text) if fully_overlaps(a, b))


def solve_part_two(text: str) -> int:
    return sum(1 for a, b in parse_pairs(text) if overlaps(a, b))
