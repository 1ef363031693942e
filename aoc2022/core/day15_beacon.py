"""Day 15: Beacon Exclusion Zone - reason about sensor coverage diamonds.

Invariants:
    - A sensor covers every cell within the Manhattan distance of its beacon
    - Part one excludes cells that already hold a known beacon
    - Part two expects exactly one uncovered cell inside [0, limit]^2

Design Decisions:
    - Row coverage as merged intervals: cost depends on sensors, not on width
    - Part two scans rows but jumps over each covered interval at once
"""

import re
from dataclasses import dataclass

from aoc2022.core.errors import PuzzleParseError, NoSolutionError

ROW = 2_000_000
LIMIT = 4_000_000
FREQUENCY_FACTOR = 4_000_000

_SENSOR = re.compile(
    r"Sensor at x=(-?\d+), y=(-?\d+): closest beacon is at x=(-?\d+), y=(-?\d+)"
)


@dataclass(frozen=True)
class Sensor:
    x: int
    y: int
    beacon_x: int
    beacon_y: int

    @property
    def radius(self) -> int:
        return abs(self.x - self.beacon_x) + abs(self.y - self.beacon_y)

    def row_interval(self, row: int) -> tuple[int, int] | None:
        half = self.radius - abs(self.y - row)
        if half < 0:
            return None
        return self.x - half, self.x + half

    def covers(self, x: int, y: int) -> bool:
        return abs(self.x - x) + abs(self.y - y) <= self.radius


def parse_sensors(text: str) -> list[Sensor]:
    sensors = []
    for line in text.splitlines():
        if not line.strip():
            continue
        match = _SENSOR.search(line)
        if match is None:
            raise PuzzleParseError("Unrecognised sensor report", line)
        sensors.append(Sensor(*(int(v) for v in match.groups())))
    return sensors


def merged_intervals(sensors: list[Sensor], row: int) -> list[tuple[int, int]]:
    intervals = sorted(filter(None, (s.row_interval(row) for s in sensors)))
    merged: list[tuple[int, int]] = []
    for lo, hi in intervals:
        if merged and lo <= merged[-1][1] + 1:
            merged[-1] = (merged[-1][0], max(merged[-1][1], hi))
        else:
            merged.append((lo, hi))
    return merged


def excluded_positions(sensors: list[Sensor], row: int) -> int:
    intervals = merged_intervals(sensors, row)
    covered = sum(hi - lo + 1 for lo, hi in intervals)
    beacons = {(s.beacon_x, s.beacon_y) for s in sensors if s.beacon_y == row}
    on_row = sum(1 for bx, _ in beacons if any(lo <= bx <= hi for lo, hi in intervals))
    return covered - on_row


def _candidates(sensors: list[Sensor], limit: int):
    """Cells just outside two sensor diamonds, plus the corners of the search box."""
    rising, falling = set(), set()
    for s in sensors:
        reach = s.radius + 1
        rising.update((s.x + s.y - reach, s.x + s.y + reach))
        falling.update((s.x - s.y - reach, s.x - s.y + reach))
    for a in rising:
        for b in falling:
            if (a + b) % 2 == 0:
                yield (a + b) // 2, (a - b) // 2
    yield from ((0, 0), (0, limit), (limit, 0), (limit, limit))


def find_distress_beacon(sensors: list[Sensor], limit: int) -> tuple[int, int]:
    for x, y in _candidates(sensors, limit):
        if 0 <= x <= limit and 0 <= y <= limit and not any(s.covers(x, y) for s in sensors):
            return x, y
    # A lone gap can also sit on the box border between two diamonds
    for y in range(limit + 1):
        x = 0
        for lo, hi in merged_intervals(sensors, y):
            if lo > x:
                break
            x = max(x, hi + 1)
        if x <= limit:
            return x, y
    raise NoSolutionError(f"Every position in [0, {limit}] is covered")


def solve_part_one(text: str, row: int = ROW) -> int:
    return excluded_positions(parse_sensors(text), row)


def solve_part_two(text: str, limit: int = LIMIT) -> int:
    x, y = find_distress_beacon(parse_sensors(text), limit)
    return x * FREQUENCY_FACTOR + y
