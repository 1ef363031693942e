"""Day 19: Not Enough Minerals - pick robot factory blueprints to crack geodes.

Invariants:
    - One robot built per minute at most; it starts collecting the minute after
    - Blueprints may be written on one line or wrapped over several
    - Part two only considers the first three blueprints

Design Decisions:
    - Search branches on "which robot to build next" and skips the waiting
      minutes, instead of branching minute by minute
    - Geodes are credited when a geode robot is built (it will crack one per
      remaining minute), so geode robots and geode stock are not tracked
    - Prunes: never hold more robots of a kind than any recipe can spend per
      minute, and stop when even a geode robot every minute cannot beat the best
"""

import math
import re
from dataclasses import dataclass

from aoc2022.core.errors import PuzzleParseError

_BLUEPRINT = re.compile(
    r"Blueprint (\d+):\s+"
    r"Each ore robot costs (\d+) ore\.\s+"
    r"Each clay robot costs (\d+) ore\.\s+"
    r"Each obsidian robot costs (\d+) ore and (\d+) clay\.\s+"
    r"Each geode robot costs (\d+) ore and (\d+) obsidian\."
)


@dataclass(frozen=True)
class Blueprint:
    number: int
    ore_robot_ore: int
    clay_robot_ore: int
    obsidian_robot_ore: int
    obsidian_robot_clay: int
    geode_robot_ore: int
    geode_robot_obsidian: int

    @property
    def max_ore_spend(self) -> int:
        return max(
            self.ore_robot_ore, self.clay_robot_ore,
            self.obsidian_robot_ore, self.geode_robot_ore,
        )


def parse_blueprints(text: str) -> list[Blueprint]:
    blueprints = [
        Blueprint(*(int(v) for v in m.groups())) for m in _BLUEPRINT.finditer(text)
    ]
    if not blueprints:
        raise PuzzleParseError("No blueprint found")
    if len(blueprints) != text.count("Blueprint"):
        raise PuzzleParseError("Some blueprints could not be parsed")
    return blueprints


def _wait(cost: int, stock: int, robots: int) -> int:
    """Minutes needed to afford `cost`, plus the minute spent building."""
    if stock >= cost:
        return 1
    return math.ceil((cost - stock) / robots) + 1


def max_geodes(bp: Blueprint, minutes: int) -> int:
    best = 0

    def search(t, ore_bots, clay_bots, obs_bots, ore, clay, obs, geodes):
        nonlocal best
        best = max(best, geodes)
        if geodes + t * (t - 1) // 2 <= best:
            return
        if obs_bots:
            wait = max(
                _wait(bp.geode_robot_ore, ore, ore_bots),
                _wait(bp.geode_robot_obsidian, obs, obs_bots),
            )
            if wait < t:
                search(
                    t - wait, ore_bots, clay_bots, obs_bots,
                    ore + ore_bots * wait - bp.geode_robot_ore,
                    clay + clay_bots * wait,
                    obs + obs_bots * wait - bp.geode_robot_obsidian,
                    geodes + t - wait,
                )
        if clay_bots and obs_bots < bp.geode_robot_obsidian:
            wait = max(
                _wait(bp.obsidian_robot_ore, ore, ore_bots),
                _wait(bp.obsidian_robot_clay, clay, clay_bots),
            )
            if wait < t:
                search(
                    t - wait, ore_bots, clay_bots, obs_bots + 1,
                    ore + ore_bots * wait - bp.obsidian_robot_ore,
                    clay + clay_bots * wait - bp.obsidian_robot_clay,
                    obs + obs_bots * wait,
                    geodes,
                )
        if clay_bots < bp.obsidian_robot_clay:
            wait = _wait(bp.clay_robot_ore, ore, ore_bots)
            if wait < t:
                search(
                    t - wait, ore_bots, clay_bots + 1, obs_bots,
                    ore + ore_bots * wait - bp.clay_robot_ore,
                    clay + clay_bots * wait,
                    obs + obs_bots * wait,
                    geodes,
                )
        if ore_bots < bp.max_ore_spend:
            wait = _wait(bp.ore_robot_ore, ore, ore_bots)
            if wait < t:
                search(
                    t - wait, ore_bots + 1, clay_bots, obs_bots,
                    ore + ore_bots * wait - bp.ore_robot_ore,
                    clay + clay_bots * wait,
                    obs + obs_bots * wait,
                    geodes,
                )

    search(minutes, 1, 0, 0, 0, 0, 0, 0)
    return best


def quality_level(bp: Blueprint, minutes: int = 24) -> int:
    return bp.number * max_geodes(bp, minutes)


def solve_part_one(text: str) -> int:
    return sum(quality_level(bp) for bp in parse_blueprints(text))


def solve_part_two(text: str) -> int:
    return math.prod(max_geodes(bp, 32) for bp in parse_blueprints(text)[:3])
