"""Day 25: Full of Hot Air - add numbers written in SNAFU (balanced base 5).

Invariants:
    - Digits are = (-2), - (-1), 0, 1, 2, most significant first
    - to_snafu(from_snafu(s)) == s for every canonical s; 0 is written "0"
"""

from aoc2022.core.errors import PuzzleParseError

_DIGITS = {"=": -2, "-": -1, "0": 0, "1": 1, "2": 2}
_SYMBOLS = {v: k for k, v in _DIGITS.items()}


def from_snafu(number: str) -> int:
    value = 0
    for char in number:
        if char not in _DIGITS:
            raise PuzzleParseError("Unknown SNAFU digit", number)
        value = value * 5 + _DIGITS[char]
    return value


def to_snafu(value: int) -> str:
    if value == 0:
        return "0"
    if value < 0:
        return "".join(_SYMBOLS[-_DIGITS[c]] for c in to_snafu(-value))
    digits = []
    while value:
        value, rem = divmod(value, 5)
        if rem > 2:
            rem -= 5
            value += 1
        digits.append(_SYMBOLS[rem])
    return "".join(reversed(digits))


def solve_part_one(text: str) -> str:
    return to_snafu(sum(from_snafu(line.strip()) for line in text.splitlines() if line.strip()))
