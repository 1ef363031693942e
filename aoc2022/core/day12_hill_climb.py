"""Day 12: Hill Climbing Algorithm - shortest climbs on a heightmap.

Invariants:
    - S has elevation a, E has elevation z
    - A step may climb at most one level and descend any amount
    - Unreachable goals raise NoSolutionError

Design Decisions:
    - Breadth-first search from E with the climbing rule reversed: one search
      answers both "from S" and "from any a"
"""

from collections import deque
from dataclasses import dataclass

from aoc2022.core.errors import PuzzleParseError, NoSolutionError

Cell = tuple[int, int]


@dataclass
class Heightmap:
    heights: list[list[int]]
    start: Cell
    exit: Cell

    def neighbours(self, cell: Cell):
        r, c = cell
        for nr, nc in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
            if 0 <= nr < len(self.heights) and 0 <= nc < len(self.heights[nr]):
                yield nr, nc


def parse_heightmap(text: str) -> Heightmap:
    heights = []
    start = exit_ = None
    for r, line in enumerate(raw.strip() for raw in text.splitlines() if raw.strip()):
        row = []
        for c, char in enumerate(line):
            if char == "S":
                start, char = (r, c), "a"
            elif char == "E":
                exit_, char = (r, c), "z"
            if not "a" <= char <= "z":
                raise PuzzleParseError("Unknown elevation mark", line)
            row.append(ord(char) - ord("a"))
        heights.append(row)
    if start is None or exit_ is None:
        raise PuzzleParseError("Heightmap needs both S and E")
    return Heightmap(heights, start, exit_)


def distances_to_exit(hmap: Heightmap) -> dict[Cell, int]:
    """Fewest steps from every cell that can reach E."""
    dist = {hmap.exit: 0}
    queue = deque([hmap.exit])
    while queue:
        cell = queue.popleft()
        height = hmap.heights[cell[0]][cell[1]]
        for nxt in hmap.neighbours(cell):
            if nxt not in dist and height - hmap.heights[nxt[0]][nxt[1]] <= 1:
                dist[nxt] = dist[cell] + 1
                queue.append(nxt)
    return dist


def solve_part_one(text: str) -> int:
    hmap = parse_heightmap(text)
    dist = distances_to_exit(hmap)
    if hmap.start not in dist:
        raise NoSolutionError("E is unreachable from S")
    return dist[hmap.start]


def solve_part_two(text: str) -> int:
    hmap = parse_heightmap(text)
    dist = distances_to_exit(hmap)
    lowest = [d for (r, c), d in dist.items() if hmap.heights[r][c] == 0]
    if not lowest:
        raise NoSolutionError("E is unreachable from every square of elevation a")
    return min(lowest)
