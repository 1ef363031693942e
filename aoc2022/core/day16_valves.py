"""Day 16: Proboscidea Volcanium - open valves to release the most pressure.

Invariants:
    - Moving through one tunnel takes a minute, opening a valve takes a minute
    - Only valves with a positive flow rate are worth opening
    - With the elephant, both actors work on disjoint sets of valves

Design Decisions:
    - Collapse the tunnel graph to shortest distances between useful valves
    - Depth-first search records the best release for every set of opened
      valves (a bitmask); the elephant answer combines two disjoint sets
"""

import re
from collections import deque

from aoc2022.core.errors import PuzzleParseError

START = "AA"

_VALVE = re.compile(
    r"Valve (\w+) has flow rate=(\d+); tunnels? leads? to valves? (.+)$"
)


def parse_valves(text: str) -> tuple[dict[str, int], dict[str, list[str]]]:
    rates: dict[str, int] = {}
    tunnels: dict[str, list[str]] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        match = _VALVE.match(line)
        if match is None:
            raise PuzzleParseError("Unrecognised valve report", line)
        name, rate, targets = match.groups()
        rates[name] = int(rate)
        tunnels[name] = [t.strip() for t in targets.split(",")]
    if START not in rates:
        raise PuzzleParseError(f"Missing start valve {START}")
    return rates, tunnels


def _distances_from(source: str, tunnels: dict[str, list[str]]) -> dict[str, int]:
    dist = {source: 0}
    queue = deque([source])
    while queue:
        valve = queue.popleft()
        for nxt in tunnels.get(valve, []):
            if nxt not in dist:
                dist[nxt] = dist[valve] + 1
                queue.append(nxt)
    return dist


def best_releases(
    rates: dict[str, int], tunnels: dict[str, list[str]], minutes: int,
) -> tuple[list[str], dict[int, int]]:
    """Useful valves and the best pressure released for each opened-valve mask."""
    useful = sorted(v for v, r in rates.items() if r > 0)
    distances = {v: _distances_from(v, tunnels) for v in [START, *useful]}
    best: dict[int, int] = {}

    def visit(valve: str, remaining: int, mask: int, released: int):
        if best.get(mask, -1) < released:
            best[mask] = released
        for i, nxt in enumerate(useful):
            bit = 1 << i
            if mask & bit or nxt not in distances[valve]:
                continue
            left = remaining - distances[valve][nxt] - 1
            if left <= 0:
                continue
            visit(nxt, left, mask | bit, released + left * rates[nxt])

    visit(START, minutes, 0, 0)
    return useful, best


def max_pressure(text: str, minutes: int = 30) -> int:
    rates, tunnels = parse_valves(text)
    _, best = best_releases(rates, tunnels, minutes)
    return max(best.values())


def max_pressure_with_elephant(text: str, minutes: int = 26) -> int:
    rates, tunnels = parse_valves(text)
    useful, best = best_releases(rates, tunnels, minutes)
    full = (1 << len(useful)) - 1
    # Best release using any subset of each mask
    within = [0] * (full + 1)
    for mask, released in best.items():
        within[mask] = released
    for i in range(len(useful)):
        bit = 1 << i
        for mask in range(full + 1):
            if mask & bit and within[mask ^ bit] > within[mask]:
                within[mask] = within[mask ^ bit]
    return max(within[mask] + within[full ^ mask] for mask in range(full + 1))


def solve_part_one(text: str) -> int:
    return max_pressure(text)


def solve_part_two(text: str) -> int:
    return max_pressure_with_elephant(text)
