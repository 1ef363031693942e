"""Day 6: Tuning Trouble - find start-of-packet and start-of-message markers."""

from collections import Counter

from aoc2022.core.errors import NoSolutionError

PACKET_MARKER = 4
MESSAGE_MARKER = 14


def detect_marker(signal: str, size: int) -> int:
    """Characters processed once the last `size` characters are all different."""
    window: Counter[str] = Counter()
    for i, char in enumerate(signal):
        window[char] += 1
        if i >= size:
            old = signal[i - size]
            window[old] -= 1
            if not window[old]:
                del window[old]
        if len(window) == size:
            return i + 1
    raise NoSolutionError(f"No marker of {size} distinct characters")


def solve_part_one(text: str) -> int:
    return detect_marker(text.strip(), PACKET_MARKER)


def solve_part_two(text: str) -> int:
    return detect_marker(text.strip(), MESSAGE_MARKER)
