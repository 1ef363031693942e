"""Puzzle Dispatch - explicit routing from day number to solver functions.

Invariants:
    - Every day->solver mapping is visible, no getattr magic, no auto-discovery
    - Unknown days raise UnknownDayError
    - Day 25 has a single part; asking for its second part raises UnknownDayError

Design Decisions:
    - Explicit dict over importlib: adding a day requires editing this module
    - Solvers registered per part so the runner can time each part on its own
"""

from dataclasses import dataclass
from typing import Callable

from aoc2022.core import (
    day01_calories,
    day02_rock_paper_scissors,
    day03_rucksacks,
    day04_cleanup,
    day05_crates,
    day06_tuning,
    day07_filesystem,
    day08_treehouse,
    day09_rope,
    day10_crt,
    day11_monkeys,
    day12_hill_climb,
    day13_distress,
    day14_sand,
    day15_beacon,
    day16_valves,
    day17_pyroclastic,
    day18_lava,
    day19_geodes,
    day20_grove,
    day21_riddle,
    day22_monkey_map,
    day23_diffusion,
    day24_blizzards,
    day25_snafu,
)
from aoc2022.core.domain_types import Answer, PuzzlePart
from aoc2022.core.errors import UnknownDayError

Solver = Callable[[str], Answer]


@dataclass(frozen=True)
class Puzzle:
    """A registered day: its title and one solver per part."""
    day: int
    title: str
    parts: dict[PuzzlePart, Solver]


def _puzzle(day: int, title: str, part_one: Solver, part_two: Solver | None = None) -> Puzzle:
    parts = {PuzzlePart.ONE: part_one}
    if part_two is not None:
        parts[PuzzlePart.TWO] = part_two
    return Puzzle(day, title, parts)


# ADR: every mapping explicit, adding a day requires editing this tuple
PUZZLES: dict[int, Puzzle] = {
    p.day: p for p in (
        _puzzle(
            1, "Calorie Counting",
            day01_calories.solve_part_one, day01_calories.solve_part_two,
        ),
        _puzzle(
            2, "Rock Paper Scissors",
            day02_rock_paper_scissors.solve_part_one, day02_rock_paper_scissors.solve_part_two,
        ),
        _puzzle(
            3, "Rucksack Reorganization",
            day03_rucksacks.solve_part_one, day03_rucksacks.solve_part_two,
        ),
        _puzzle(
            4, "Camp Cleanup",
            day04_cleanup.solve_part_one, day04_cleanup.solve_part_two,
        ),
        _puzzle(
            5, "Supply Stacks",
            day05_crates.solve_part_one, day05_crates.solve_part_two,
        ),
        _puzzle(
            6, "Tuning Trouble",
            day06_tuning.solve_part_one, day06_tuning.solve_part_two,
        ),
        _puzzle(
            7, "No Space Left On Device",
            day07_filesystem.solve_part_one, day07_filesystem.solve_part_two,
        ),
        _puzzle(
            8, "Treetop Tree House",
            day08_treehouse.solve_part_one, day08_treehouse.solve_part_two,
        ),
        _puzzle(
            9, "Rope Bridge",
            day09_rope.solve_part_one, day09_rope.solve_part_two,
        ),
        _puzzle(
            10, "Cathode-Ray Tube",
            day10_crt.solve_part_one, day10_crt.solve_part_two,
        ),
        _puzzle(
            11, "Monkey in the Middle",
            day11_monkeys.solve_part_one, day11_monkeys.solve_part_two,
        ),
        _puzzle(
            12, "Hill Climbing Algorithm",
            day12_hill_climb.solve_part_one, day12_hill_climb.solve_part_two,
        ),
        _puzzle(
            13, "Distress Signal",
            day13_distress.solve_part_one, day13_distress.solve_part_two,
        ),
        _puzzle(
            14, "Regolith Reservoir",
            day14_sand.solve_part_one, day14_sand.solve_part_two,
        ),
        _puzzle(
            15, "Beacon Exclusion Zone",
            day15_beacon.solve_part_one, day15_beacon.solve_part_two,
        ),
        _puzzle(
            16, "Proboscidea Volcanium",
            day16_valves.solve_part_one, day16_valves.solve_part_two,
        ),
        _puzzle(
            17, "Pyroclastic Flow",
            day17_pyroclastic.solve_part_one, day17_pyroclastic.solve_part_two,
        ),
        _puzzle(
            18, "Boiling Boulders",
            day18_lava.solve_part_one, day18_lava.solve_part_two,
        ),
        _puzzle(
            19, "Not Enough Minerals",
            day19_geodes.solve_part_one, day19_geodes.solve_part_two,
        ),
        _puzzle(
            20, "Grove Positioning System",
            day20_grove.solve_part_one, day20_grove.solve_part_two,
        ),
        _puzzle(
            21, "Monkey Math",
            day21_riddle.solve_part_one, day21_riddle.solve_part_two,
        ),
        _puzzle(
            22, "Monkey Map",
            day22_monkey_map.solve_part_one, day22_monkey_map.solve_part_two,
        ),
        _puzzle(
            23, "Unstable Diffusion",
            day23_diffusion.solve_part_one, day23_diffusion.solve_part_two,
        ),
        _puzzle(
            24, "Blizzard Basin",
            day24_blizzards.solve_part_one, day24_blizzards.solve_part_two,
        ),
        # Day 25 only has one puzzle
        _puzzle(25, "Full of Hot Air", day25_snafu.solve_part_one),
    )
}


def get_puzzle(day: int) -> Puzzle:
    try:
        return PUZZLES[day]
    except KeyError:
        raise UnknownDayError(day) from None


def get_solver(day: int, part: PuzzlePart) -> Solver:
    puzzle = get_puzzle(day)
    if part not in puzzle.parts:
        raise UnknownDayError(day, part=int(part))
    return puzzle.parts[part]
