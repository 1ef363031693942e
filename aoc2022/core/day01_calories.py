"""Day 1: Calorie Counting - sum the food carried by each elf.

Invariants:
    - Elves are separated by one or more blank lines
    - Trailing blank lines never produce an empty elf
"""

from aoc2022.core.errors import PuzzleParseError


def parse_elves(text: str) -> list[list[int]]:
    """One list of calories per elf, in input order."""
    elves: list[list[int]] = []
    ready = False
    for line in text.splitlines():
        line = line.strip()
        if not line:
            ready = False
            continue
        try:
            calories = int(line)
        except ValueError:
            raise PuzzleParseError("Expected a calorie count", line) from None
        if not ready:
            elves.append([])
            ready = True
        elves[-1].append(calories)
    return elves


def sum_top_elves(totals: list[int], n: int) -> int:
    """Sum of the n largest totals. Fewer than n elves sums them all."""
    return sum(sorted(totals, reverse=True)[:n])


def solve_part_one(text: str) -> int:
    return sum_top_elves([sum(food) for food in parse_elves(text)], 1)


def solve_part_two(text: str) -> int:
    return sum_top_elves([sum(food) for food in parse_elves(text)], 3)
