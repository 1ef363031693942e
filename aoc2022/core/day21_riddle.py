"""Day 21: Monkey Math - evaluate and invert a tree of yelling monkeys.

Invariants:
    - Every monkey yells a number or combines two other monkeys with + - * /
    - In part two `root` compares its operands for equality and `humn` is the
      unknown; the unknown appears in exactly one branch of every operation
      on the path from root

Design Decisions:
    - Arithmetic on Fraction so that inverted divisions stay exact
"""

import operator
import re
from fractions import Fraction

from aoc2022.core.errors import PuzzleParseError, NoSolutionError

ROOT = "root"
HUMAN = "humn"

_OPS = {"+": operator.add, "-": operator.sub, "*": operator.mul, "/": operator.truediv}
_JOB = re.compile(r"^(\w+): (?:(-?\d+)|(\w+) ([-+*/]) (\w+))$")

Job = int | tuple[str, str, str]  # number, or (left, op, right)


def parse_jobs(text: str) -> dict[str, Job]:
    jobs: dict[str, Job] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        match = _JOB.match(line)
        if match is None:
            raise PuzzleParseError("Unrecognised monkey job", line)
        name, number, left, op, right = match.groups()
        jobs[name] = int(number) if number is not None else (left, op, right)
    if ROOT not in jobs:
        raise PuzzleParseError(f"Missing {ROOT} monkey")
    for name, job in jobs.items():
        if isinstance(job, tuple):
            for operand in (job[0], job[2]):
                if operand not in jobs:
                    raise PuzzleParseError(f"{name} waits for unknown monkey {operand}")
    return jobs


def evaluate(jobs: dict[str, Job], name: str, cache: dict[str, Fraction] | None = None) -> Fraction:
    cache = {} if cache is None else cache
    if name in cache:
        return cache[name]
    if name not in jobs:
        raise PuzzleParseError(f"Unknown monkey {name}")
    job = jobs[name]
    if isinstance(job, int):
        value = Fraction(job)
    else:
        left, op, right = job
        value = _OPS[op](evaluate(jobs, left, cache), evaluate(jobs, right, cache))
    cache[name] = value
    return value


def _depends_on(jobs: dict[str, Job], name: str, target: str) -> bool:
    if name == target:
        return True
    job = jobs[name]
    if isinstance(job, int):
        return False
    return _depends_on(jobs, job[0], target) or _depends_on(jobs, job[2], target)


def _invert(op: str, target: Fraction, known: Fraction, unknown_on_left: bool) -> Fraction:
    """Value of the unknown operand given the operation result and the other operand."""
    if op == "+":
        return target - known
    if op == "*":
        return target / known
    if op == "-":
        return target + known if unknown_on_left else known - target
    return target * known if unknown_on_left else known / target


def solve_for_human(jobs: dict[str, Job]) -> Fraction:
    """Number `humn` must yell so that both operands of root are equal."""
    if HUMAN not in jobs or isinstance(jobs[ROOT], int):
        raise NoSolutionError(f"{ROOT} does not compare two monkeys")
    left, _, right = jobs[ROOT]
    if _depends_on(jobs, right, HUMAN):
        left, right = right, left
    if not _depends_on(jobs, left, HUMAN):
        raise NoSolutionError(f"{HUMAN} does not affect {ROOT}")
    cache: dict[str, Fraction] = {}
    target = evaluate(jobs, right, cache)
    name = left
    while name != HUMAN:
        a, op, b = jobs[name]
        unknown_on_left = _depends_on(jobs, a, HUMAN)
        known = evaluate(jobs, b if unknown_on_left else a, cache)
        target = _invert(op, target, known, unknown_on_left)
        name = a if unknown_on_left else b
    return target


def _as_answer(value: Fraction) -> int:
    if value.denominator != 1:
        raise NoSolutionError(f"Result {value} is not an integer")
    return int(value)


def solve_part_one(text: str) -> int:
    return _as_answer(evaluate(parse_jobs(text), ROOT))


def solve_part_two(text: str) -> int:
    return _as_answer(solve_for_human(parse_jobs(text)))
