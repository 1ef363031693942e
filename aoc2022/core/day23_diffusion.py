"""Day 23: Unstable Diffusion - spread elves out over an infinite grid.

Invariants:
    - An elf with no neighbour among its 8 surrounding cells stays put
    - Proposals are considered N, S, W, E and the first option rotates each round
    - Elves proposing the same cell all stay where they are
"""

from collections import Counter

from aoc2022.core.errors import PuzzleParseError

Elf = tuple[int, int]  # (row, col)

_AROUND = tuple((dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if dr or dc)

# (move, cells that must be free), in initial priority order
_PROPOSALS = (
    ((-1, 0), ((-1, -1), (-1, 0), (-1, 1))),
    ((1, 0), ((1, -1), (1, 0), (1, 1))),
    ((0, -1), ((-1, -1), (0, -1), (1, -1))),
    ((0, 1), ((-1, 1), (0, 1), (1, 1))),
)


def parse_elves(text: str) -> set[Elf]:
    elves = set()
    for r, line in enumerate(text.splitlines()):
        for c, char in enumerate(line.strip()):
            if char == "#":
                elves.add((r, c))
            elif char != ".":
                raise PuzzleParseError("Unknown ground tile", line)
    return elves


def spread(elves: set[Elf], round_index: int) -> tuple[set[Elf], bool]:
    """One round. Returns the new positions and whether any elf moved."""
    proposals: dict[Elf, Elf] = {}
    for r, c in elves:
        if not any((r + dr, c + dc) in elves for dr, dc in _AROUND):
            continue
        for i in range(4):
            (mr, mc), checks = _PROPOSALS[(round_index + i) % 4]
            if not any((r + dr, c + dc) in elves for dr, dc in checks):
                proposals[(r, c)] = (r + mr, c + mc)
                break
    counts = Counter(proposals.values())
    moved = False
    result = set()
    for elf in elves:
        target = proposals.get(elf)
        if target is not None and counts[target] == 1:
            result.add(target)
            moved = True
        else:
            result.add(elf)
    return result, moved


def empty_ground(elves: set[Elf]) -> int:
    rows = [r for r, _ in elves]
    cols = [c for _, c in elves]
    return (max(rows) - min(rows) + 1) * (max(cols) - min(cols) + 1) - len(elves)


def solve_part_one(text: str, rounds: int = 10) -> int:
    elves = parse_elves(text)
    for i in range(rounds):
        elves, _ = spread(elves, i)
    return empty_ground(elves)


def solve_part_two(text: str) -> int:
    elves = parse_elves(text)
    round_index = 0
    while True:
        elves, moved = spread(elves, round_index)
        round_index += 1
        if not moved:
            return round_index
