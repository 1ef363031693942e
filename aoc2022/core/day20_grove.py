"""Day 20: Grove Positioning System - mix an encrypted circular list.

Invariants:
    - Numbers move in their original order, whatever their current position
    - A number moving around the ring skips itself, so shifts are modulo len - 1
    - Duplicate values are allowed; identity is the original index
"""

from aoc2022.core.errors import PuzzleParseError, NoSolutionError

DECRYPTION_KEY = 811_589_153
COORDINATE_OFFSETS = (1000, 2000, 3000)


def parse_numbers(text: str) -> list[int]:
    numbers = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        try:
            numbers.append(int(line))
        except ValueError:
            raise PuzzleParseError("Expected an integer", line) from None
    return numbers


def mix(numbers: list[int], rounds: int = 1) -> list[int]:
    """Mixed list of values, in ring order starting anywhere."""
    ring = list(range(len(numbers)))
    modulus = len(numbers) - 1
    for _ in range(rounds):
        for original, value in enumerate(numbers):
            if not modulus:
                break
            pos = ring.index(original)
            ring.pop(pos)
            ring.insert((pos + value) % modulus, original)
    return [numbers[i] for i in ring]


def grove_coordinates(numbers: list[int], key: int = 1, rounds: int = 1) -> int:
    decrypted = [n * key for n in numbers]
    mixed = mix(decrypted, rounds)
    if 0 not in mixed:
        raise NoSolutionError("The encrypted file has no 0")
    zero = mixed.index(0)
    return sum(mixed[(zero + offset) % len(mixed)] for offset in COORDINATE_OFFSETS)


def solve_part_one(text: str) -> int:
    return grove_coordinates(parse_numbers(text))


def solve_part_two(text: str) -> int:
    return grove_coordinates(parse_numbers(text), DECRYPTION_KEY, 10)
