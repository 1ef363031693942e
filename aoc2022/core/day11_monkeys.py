"""Day 11: Monkey in the Middle - simulate monkeys throwing items around.

Invariants:
    - Monkeys act in index order; each inspects all its items in a turn
    - Relaxed rounds divide the worry level by 3 after each inspection
    - Tense rounds keep worry modulo the product of all divisors, which
      preserves every divisibility test

Design Decisions:
    - Monkey as a dataclass; the operation is stored as (operator, operand)
      with operand None meaning "old"
"""

import math
import re
from dataclasses import dataclass, field

from aoc2022.core.errors import PuzzleParseError

_MONKEY = re.compile(
    r"Monkey (\d+):\s*"
    r"Starting items:([\d, ]*)\s*"
    r"Operation: new = old ([*+]) (old|\d+)\s*"
    r"Test: divisible by (\d+)\s*"
    r"If true: throw to monkey (\d+)\s*"
    r"If false: throw to monkey (\d+)",
)


@dataclass
class Monkey:
    items: list[int]
    operator: str
    operand: int | None
    divisor: int
    if_true: int
    if_false: int
    inspected: int = field(default=0)

    def inspect(self, worry: int) -> int:
        value = worry if self.operand is None else self.operand
        return worry * value if self.operator == "*" else worry + value

    def target(self, worry: int) -> int:
        return self.if_true if worry % self.divisor == 0 else self.if_false


def parse_monkeys(text: str) -> list[Monkey]:
    monkeys = []
    for block in re.split(r"\n\s*\n", text.strip()):
        match = _MONKEY.search(block)
        if match is None:
            raise PuzzleParseError("Unrecognised monkey description", block.splitlines()[0])
        index, items, operator, operand, divisor, if_true, if_false = match.groups()
        if int(index) != len(monkeys):
            raise PuzzleParseError("Monkeys must be listed in order", block.splitlines()[0])
        monkeys.append(Monkey(
            items=[int(x) for x in items.replace(",", " ").split()],
            operator=operator,
            operand=None if operand == "old" else int(operand),
            divisor=int(divisor),
            if_true=int(if_true),
            if_false=int(if_false),
        ))
    if len(monkeys) < 2:
        raise PuzzleParseError("At least two monkeys are needed for monkey business")
    for i, monkey in enumerate(monkeys):
        if monkey.divisor == 0:
            raise PuzzleParseError(f"Monkey {i} tests divisibility by 0")
        for target in (monkey.if_true, monkey.if_false):
            if target >= len(monkeys):
                raise PuzzleParseError(f"Monkey {i} throws to unknown monkey {target}")
            if target == i:
                raise PuzzleParseError(f"Monkey {i} throws to itself")
    return monkeys


def play_rounds(monkeys: list[Monkey], rounds: int, relaxed: bool):
    modulus = math.prod(m.divisor for m in monkeys)
    for _ in range(rounds):
        for monkey in monkeys:
            items, monkey.items = monkey.items, []
            monkey.inspected += len(items)
            for worry in items:
                worry = monkey.inspect(worry)
                worry = worry // 3 if relaxed else worry % modulus
                monkeys[monkey.target(worry)].items.append(worry)


def monkey_business(monkeys: list[Monkey]) -> int:
    first, second = sorted((m.inspected for m in monkeys), reverse=True)[:2]
    return first * second


def solve_part_one(text: str) -> int:
    monkeys = parse_monkeys(text)
    play_rounds(monkeys, 20, relaxed=True)
    return monkey_business(monkeys)


def solve_part_two(text: str) -> int:
    monkeys = parse_monkeys(text)
    play_rounds(monkeys, 10_000, relaxed=False)
    return monkey_business(monkeys)
