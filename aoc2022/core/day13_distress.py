"""Day 13: Distress Signal - compare and sort nested packet lists.

Invariants:
    - Integers compare numerically; lists compare element-wise, then by length
    - Mixed int/list pairs promote the int to a one-element list
    - Divider packets [[2]] and [[6]] are added before sorting in part two
"""

import json
from functools import cmp_to_key

from aoc2022.core.errors import PuzzleParseError

DIVIDERS = ([[2]], [[6]])

Packet = int | list


def _is_packet(value) -> bool:
    """Only ints and lists, nested to any depth; bools are not ints here."""
    if isinstance(value, list):
        return all(_is_packet(v) for v in value)
    return isinstance(value, int) and not isinstance(value, bool)


def parse_packets(text: str) -> list[Packet]:
    packets = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        try:
            packet = json.loads(line)
        except json.JSONDecodeError:
            raise PuzzleParseError("Malformed packet", line) from None
        if not isinstance(packet, list):
            raise PuzzleParseError("A packet must be a list", line)
        if not _is_packet(packet):
            raise PuzzleParseError("Packets hold only integers and lists", line)
        packets.append(packet)
    return packets


def compare(left: Packet, right: Packet) -> int:
    """Negative when left comes first, positive when right does, 0 when undecided."""
    if isinstance(left, int) and isinstance(right, int):
        return left - right
    if isinstance(left, int):
        left = [left]
    if isinstance(right, int):
        right = [right]
    for a, b in zip(left, right):
        result = compare(a, b)
        if result:
            return result
    return len(left) - len(right)


def solve_part_one(text: str) -> int:
    packets = parse_packets(text)
    if len(packets) % 2:
        raise PuzzleParseError("Packets must come in pairs")
    return sum(
        i // 2 + 1 for i in range(0, len(packets), 2)
        if compare(packets[i], packets[i + 1]) < 0
    )


def solve_part_two(text: str) -> int:
    packets = parse_packets(text) + list(DIVIDERS)
    packets.sort(key=cmp_to_key(compare))
    key = 1
    for i, packet in enumerate(packets, start=1):
        if any(packet is divider for divider in DIVIDERS):
            key *= i
    return key
