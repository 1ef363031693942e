"""Day 14: Regolith Reservoir - pour sand into a cave of rock paths.

Invariants:
    - Sand enters at (500, 0) and tries down, down-left, down-right in order
    - Without a floor, sand falling below the lowest rock is lost for good
    - With a floor at max_y + 2 the cave fills until the source is blocked

Design Decisions:
    - Blocked cells as a set of (x, y): sparse, and the floor is implicit
    - Each grain restarts from the path of the previous one, so a grain only
      re-simulates the last fall step instead of the whole drop
"""

from aoc2022.core.errors import PuzzleParseError

SOURCE = (500, 0)

Point = tuple[int, int]


def parse_rocks(text: str) -> set[Point]:
    rocks: set[Point] = set()
    for line in text.splitlines():
        if not line.strip():
            continue
        try:
            path = [tuple(int(v) for v in p.split(",")) for p in line.split("->")]
        except ValueError:
            raise PuzzleParseError("Expected 'x,y -> x,y ...'", line) from None
        if any(len(p) != 2 for p in path):
            raise PuzzleParseError("Expected 'x,y -> x,y ...'", line)
        for (x1, y1), (x2, y2) in zip(path, path[1:]):
            for x in range(min(x1, x2), max(x1, x2) + 1):
                for y in range(min(y1, y2), max(y1, y2) + 1):
                    rocks.add((x, y))
    if not rocks:
        raise PuzzleParseError("No rock paths found")
    return rocks


def pour_sand(rocks: set[Point], floor: bool) -> int:
    """Units of sand at rest when the simulation stops."""
    blocked = set(rocks)
    bottom = max(y for _, y in rocks)
    floor_y = bottom + 2
    path = [SOURCE]
    resting = 0
    while path:
        x, y = path[-1]
        if not floor and y > bottom:
            break
        for nxt in ((x, y + 1), (x - 1, y + 1), (x + 1, y + 1)):
            if nxt not in blocked and nxt[1] < floor_y:
                path.append(nxt)
                break
        else:
            blocked.add(path.pop())
            resting += 1
    return resting


def solve_part_one(text: str) -> int:
    return pour_sand(parse_rocks(text), floor=False)


def solve_part_two(text: str) -> int:
    return pour_sand(parse_rocks(text), floor=True)
