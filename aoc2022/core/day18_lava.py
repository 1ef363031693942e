"""Day 18: Boiling Boulders - surface area of a droplet made of unit cubes.

Invariants:
    - Total area counts every cube face not shared with another cube
    - Exterior area counts only faces reachable by steam from outside,
      so air pockets trapped inside the droplet are excluded
"""

from collections import deque

from aoc2022.core.errors import PuzzleParseError

Cube = tuple[int, int, int]

_FACES = ((1, 0, 0), (-1, 0, 0), (0, 1, 0), (0, -1, 0), (0, 0, 1), (0, 0, -1))


def parse_cubes(text: str) -> set[Cube]:
    cubes = set()
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        try:
            x, y, z = (int(v) for v in line.split(","))
        except ValueError:
            raise PuzzleParseError("Expected 'x,y,z'", line) from None
        cubes.add((x, y, z))
    return cubes


def _neighbours(cube: Cube):
    x, y, z = cube
    for dx, dy, dz in _FACES:
        yield x + dx, y + dy, z + dz


def surface_area(cubes: set[Cube]) -> int:
    return sum(1 for cube in cubes for n in _neighbours(cube) if n not in cubes)


def exterior_surface_area(cubes: set[Cube]) -> int:
    """Flood-fill steam through a box one unit larger than the droplet."""
    if not cubes:
        return 0
    lo = [min(c[i] for c in cubes) - 1 for i in range(3)]
    hi = [max(c[i] for c in cubes) + 1 for i in range(3)]
    start = (lo[0], lo[1], lo[2])
    steam = {start}
    queue = deque([start])
    faces = 0
    while queue:
        cell = queue.popleft()
        for n in _neighbours(cell):
            if not all(lo[i] <= n[i] <= hi[i] for i in range(3)):
                continue
            if n in cubes:
                faces += 1
            elif n not in steam:
                steam.add(n)
                queue.append(n)
    return faces


def solve_part_one(text: str) -> int:
    return surface_area(parse_cubes(text))


def solve_part_two(text: str) -> int:
    return exterior_surface_area(parse_cubes(text))
