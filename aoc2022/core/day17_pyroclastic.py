"""Day 17: Pyroclastic Flow - stack falling rocks pushed by jets of gas.

Invariants:
    - The chamber is 7 units wide; rocks appear 2 units from the left wall and
      3 units above the highest rock (or the floor)
    - Each step is a jet push (ignored when blocked) followed by a fall
    - Rocks and jets cycle in input order

Design Decisions:
    - Occupied cells as a set; y grows upwards from the floor at y = 0
    - Cycle detection keyed on (top surface profile, jet index, rock index):
      once a state repeats, whole cycles are skipped arithmetically
"""

from aoc2022.core.errors import PuzzleParseError

WIDTH = 7
SHORT_RUN = 2022
LONG_RUN = 1_000_000_000_000

ROCKS = (
    ((0, 0), (1, 0), (2, 0), (3, 0)),
    ((1, 0), (0, 1), (1, 1), (2, 1), (1, 2)),
    ((0, 0), (1, 0), (2, 0), (2, 1), (2, 2)),
    ((0, 0), (0, 1), (0, 2), (0, 3)),
    ((0, 0), (1, 0), (0, 1), (1, 1)),
)


def parse_jets(text: str) -> list[int]:
    jets = []
    for char in text.strip():
        if char == "<":
            jets.append(-1)
        elif char == ">":
            jets.append(1)
        else:
            raise PuzzleParseError("Unknown jet direction", char)
    if not jets:
        raise PuzzleParseError("Empty jet pattern")
    return jets


class Chamber:
    """Tall narrow chamber filled one rock at a time."""

    def __init__(self, jets: list[int]):
        self.jets = jets
        self.occupied: set[tuple[int, int]] = set()
        self.height = 0
        self.jet_index = 0
        self.rock_count = 0

    def _fits(self, rock, x: int, y: int) -> bool:
        return all(
            0 <= x + dx < WIDTH and y + dy >= 0 and (x + dx, y + dy) not in self.occupied
            for dx, dy in rock
        )

    def drop(self):
        rock = ROCKS[self.rock_count % len(ROCKS)]
        x, y = 2, self.height + 3
        while True:
            push = self.jets[self.jet_index]
            self.jet_index = (self.jet_index + 1) % len(self.jets)
            if self._fits(rock, x + push, y):
                x += push
            if not self._fits(rock, x, y - 1):
                break
            y -= 1
        for dx, dy in rock:
            self.occupied.add((x + dx, y + dy))
            self.height = max(self.height, y + dy + 1)
        self.rock_count += 1

    def profile(self) -> tuple[int, ...]:
        """Depth of the first occupied cell below the top, per column."""
        depths = []
        for col in range(WIDTH):
            depth = 0
            while depth < self.height and (col, self.height - 1 - depth) not in self.occupied:
                depth += 1
            depths.append(depth)
        return tuple(depths)

    def __str__(self) -> str:
        rows = []
        for y in range(self.height - 1, -1, -1):
            cells = "".join("#" if (x, y) in self.occupied else "." for x in range(WIDTH))
            rows.append(f"|{cells}|")
        rows.append("+" + "-" * WIDTH + "+")
        return "\n".join(rows)


def tower_height(jets: list[int], rocks: int) -> int:
    chamber = Chamber(jets)
    heights = [0]
    seen: dict[tuple, int] = {}
    while chamber.rock_count < rocks:
        chamber.drop()
        heights.append(chamber.height)
        key = (chamber.profile(), chamber.jet_index, chamber.rock_count % len(ROCKS))
        if key in seen:
            first = seen[key]
            period = chamber.rock_count - first
            growth = chamber.height - heights[first]
            cycles, leftover = divmod(rocks - chamber.rock_count, period)
            extra = heights[first + leftover] - heights[first]
            return chamber.height + cycles * growth + extra
        seen[key] = chamber.rock_count
    return chamber.height


def solve_part_one(text: str) -> int:
    return tower_height(parse_jets(text), SHORT_RUN)


def solve_part_two(text: str) -> int:
    return tower_height(parse_jets(text), LONG_RUN)
