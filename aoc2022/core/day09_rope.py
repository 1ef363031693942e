"""Day 9: Rope Bridge - track the cells visited by the tail of a moving rope.

Invariants:
    - Each knot follows the previous one only when they stop touching
      (including diagonally), moving at most one cell per axis per step
"""

from aoc2022.core.errors import PuzzleParseError

_STEPS = {"R": (1, 0), "L": (-1, 0), "U": (0, 1), "D": (0, -1)}


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def parse_moves(text: str) -> list[tuple[str, int]]:
    moves = []
    for line in text.splitlines():
        parts = line.split()
        if not parts:
            continue
        if len(parts) != 2 or parts[0] not in _STEPS or not parts[1].isdigit():
            raise PuzzleParseError("Expected '<R|L|U|D> N'", line)
        moves.append((parts[0], int(parts[1])))
    return moves


def simulate(moves: list[tuple[str, int]], knots: int) -> set[tuple[int, int]]:
    """Cells visited by the last knot of a rope with `knots` knots."""
    rope = [(0, 0)] * knots
    visited = {rope[-1]}
    for direction, count in moves:
        dx, dy = _STEPS[direction]
        for _ in range(count):
            rope[0] = (rope[0][0] + dx, rope[0][1] + dy)
            for i in range(1, knots):
                hx, hy = rope[i - 1]
                tx, ty = rope[i]
                if abs(hx - tx) <= 1 and abs(hy - ty) <= 1:
                    break
                rope[i] = (tx + _sign(hx - tx), ty + _sign(hy - ty))
            visited.add(rope[-1])
    return visited


def solve_part_one(text: str) -> int:
    return len(simulate(parse_moves(text), 2))


def solve_part_two(text: str) -> int:
    return len(simulate(parse_moves(text), 10))
