"""Day 24: Blizzard Basin - cross a valley of wrapping blizzards.

Invariants:
    - Blizzards move one cell per minute and wrap inside the walls
    - The expedition may wait or move orthogonally, never into a blizzard or wall
    - Blizzard positions repeat every lcm(width, height) minutes

Design Decisions:
    - Blizzards are never simulated: a cell (r, c) is hit at minute t when a
      blizzard of the matching direction started (t mod size) cells behind it
    - Breadth-first search over the set of reachable cells, one minute per layer
"""

import math
from dataclasses import dataclass

from aoc2022.core.errors import PuzzleParseError, NoSolutionError

Cell = tuple[int, int]  # (row, col) inside the walls, 0-based


@dataclass
class Valley:
    height: int
    width: int
    blizzards: dict[str, set[Cell]]
    start: Cell
    goal: Cell

    def is_free(self, cell: Cell, minute: int) -> bool:
        if cell in (self.start, self.goal):
            return True
        r, c = cell
        if not (0 <= r < self.height and 0 <= c < self.width):
            return False
        h, w = self.height, self.width
        return not (
            (r, (c - minute) % w) in self.blizzards[">"]
            or (r, (c + minute) % w) in self.blizzards["<"]
            or ((r - minute) % h, c) in self.blizzards["v"]
            or ((r + minute) % h, c) in self.blizzards["^"]
        )


def parse_valley(text: str) -> Valley:
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if len(lines) < 3:
        raise PuzzleParseError("Valley needs at least three rows")
    height, width = len(lines) - 2, len(lines[0]) - 2
    blizzards: dict[str, set[Cell]] = {d: set() for d in "><v^"}
    for r, line in enumerate(lines[1:-1]):
        if len(line) != width + 2:
            raise PuzzleParseError("Valley rows have different widths", line)
        for c, char in enumerate(line[1:-1]):
            if char in blizzards:
                blizzards[char].add((r, c))
            elif char != ".":
                raise PuzzleParseError("Unknown valley tile", line)
    if "." not in lines[0] or "." not in lines[-1]:
        raise PuzzleParseError("Missing entrance or exit")
    start = (-1, lines[0].index(".") - 1)
    goal = (height, lines[-1].index(".") - 1)
    return Valley(height, width, blizzards, start, goal)


def crossing_time(valley: Valley, source: Cell, target: Cell, minute: int) -> int:
    """Minute at which `target` is first reached when leaving `source` at `minute`."""
    reachable = {source}
    period = math.lcm(valley.height, valley.width)
    limit = minute + (valley.height * valley.width + 2) * period
    while minute < limit:
        minute += 1
        nxt = set()
        for r, c in reachable:
            for cell in ((r, c), (r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)):
                if cell == target:
                    return minute
                if valley.is_free(cell, minute):
                    nxt.add(cell)
        reachable = nxt
    raise NoSolutionError(f"No way from {source} to {target}")


def solve_part_one(text: str) -> int:
    valley = parse_valley(text)
    return crossing_time(valley, valley.start, valley.goal, 0)


def solve_part_two(text: str) -> int:
    valley = parse_valley(text)
    there = crossing_time(valley, valley.start, valley.goal, 0)
    back = crossing_time(valley, valley.goal, valley.start, there)
    return crossing_time(valley, valley.start, valley.goal, back)
