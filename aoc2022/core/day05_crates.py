"""Day 5: Supply Stacks - rearrange crates with two different cranes.

Invariants:
    - The drawing ends at the index line (" 1   2   3"); the number of stacks comes from it
    - Crate letters sit at column 4 * i + 1; drawing lines may be right-trimmed
    - Stacks are lists with the top crate last
"""

import re

from aoc2022.core.errors import PuzzleParseError

_MOVE = re.compile(r"^move (\d+) from (\d+) to (\d+)$")

Move = tuple[int, int, int]  # (count, from, to), 1-based stacks


def parse_drawing(lines: list[str]) -> list[list[str]]:
    """Stacks from the drawing lines, the last one being the index line."""
    if not lines:
        raise PuzzleParseError("Missing crate drawing")
    index_line = lines[-1].split()
    if not index_line or not all(x.isdigit() for x in index_line):
        raise PuzzleParseError("Expected stack indices", lines[-1])
    stacks: list[list[str]] = [[] for _ in index_line]
    for row in reversed(lines[:-1]):
        for col in range(len(stacks)):
            pos = col * 4 + 1
            if pos < len(row) and row[pos].isupper():
                stacks[col].append(row[pos])
    return stacks


def parse_input(text: str) -> tuple[list[list[str]], list[Move]]:
    lines = text.splitlines()
    try:
        blank = next(i for i, line in enumerate(lines) if not line.strip())
    except StopIteration:
        raise PuzzleParseError("Missing blank line between drawing and moves") from None
    stacks = parse_drawing(lines[:blank])
    moves = []
    for line in lines[blank + 1:]:
        line = line.strip()
        if not line:
            continue
        match = _MOVE.match(line)
        if match is None:
            raise PuzzleParseError("Expected 'move N from A to B'", line)
        count, source, target = (int(x) for x in match.groups())
        if not (1 <= source <= len(stacks) and 1 <= target <= len(stacks)):
            raise PuzzleParseError("Move refers to an unknown stack", line)
        moves.append((count, source, target))
    return stacks, moves


def _take(stack: list[str], count: int) -> list[str]:
    """Remove and return the top `count` crates, bottom-most first."""
    if count > len(stack):
        raise PuzzleParseError(
            f"Move takes {count} crates from a stack of {len(stack)}",
        )
    crates = stack[len(stack) - count:]
    del stack[len(stack) - count:]
    return crates


def move_one_by_one(stacks: list[list[str]], moves: list[Move]):
    for count, source, target in moves:
        stacks[target - 1].extend(reversed(_take(stacks[source - 1], count)))


def move_in_stacks(stacks: list[list[str]], moves: list[Move]):
    for count, source, target in moves:
        stacks[target - 1].extend(_take(stacks[source - 1], count))


def top_crates(stacks: list[list[str]]) -> str:
    """Top crate of each stack; empty stacks contribute a space."""
    return "".join(stack[-1] if stack else " " for stack in stacks)


def solve_part_one(text: str) -> str:
    stacks, moves = parse_input(text)
    move_one_by_one(stacks, moves)
    return top_crates(stacks)


def solve_part_two(text: str) -> str:
    stacks, moves = parse_input(text)
    move_in_stacks(stacks, moves)
    return top_crates(stacks)
