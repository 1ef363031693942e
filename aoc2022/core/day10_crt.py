"""Day 10: Cathode-Ray Tube - replay a two-instruction CPU and draw its CRT.

Invariants:
    - noop takes one cycle, addx V takes two and applies V at the end of the second
    - history[i] is the X register DURING cycle i + 1 (X starts at 1)
    - Programs shorter than the screen keep their last X value
"""

from aoc2022.core.errors import PuzzleParseError

SCREEN_WIDTH = 40
SCREEN_HEIGHT = 6
SAMPLE_CYCLES = (20, 60, 100, 140, 180, 220)


def parse_program(text: str) -> list[int]:
    """Register deltas, one per cycle."""
    deltas = []
    for line in text.splitlines():
        parts = line.split()
        if not parts:
            continue
        if parts == ["noop"]:
            deltas.append(0)
        elif parts[0] == "addx" and len(parts) == 2:
            try:
                value = int(parts[1])
            except ValueError:
                raise PuzzleParseError("Expected an integer operand", line) from None
            deltas.extend((0, value))
        else:
            raise PuzzleParseError("Unknown instruction", line)
    return deltas


def register_history(deltas: list[int], cycles: int = SCREEN_WIDTH * SCREEN_HEIGHT) -> list[int]:
    x = 1
    history = []
    for cycle in range(cycles):
        history.append(x)
        if cycle < len(deltas):
            x += deltas[cycle]
    return history


def signal_strength(history: list[int], cycles=SAMPLE_CYCLES) -> int:
    return sum(cycle * history[cycle - 1] for cycle in cycles)


def render(history: list[int], lit: str = "#", dark: str = ".") -> str:
    rows = []
    for row in range(SCREEN_HEIGHT):
        pixels = []
        for col in range(SCREEN_WIDTH):
            sprite = history[row * SCREEN_WIDTH + col]
            pixels.append(lit if abs(sprite - col) <= 1 else dark)
        rows.append("".join(pixels))
    return "\n".join(rows)


def solve_part_one(text: str) -> int:
    return signal_strength(register_history(parse_program(text)))


def solve_part_two(text: str) -> str:
    return render(register_history(parse_program(text)))
