"""Day 3: Rucksack Reorganization - priorities of misplaced items and badges."""

from aoc2022.core.errors import PuzzleParseError, NoSolutionError


def priority(item: str) -> int:
    """a-z map to 1-26, A-Z to 27-52."""
    if "a" <= item <= "z":
        return ord(item) - ord("a") + 1
    if "A" <= item <= "Z":
        return ord(item) - ord("A") + 27
    raise PuzzleParseError("Unknown item type", item)


def parse_rucksacks(text: str) -> list[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


def shared_item(*groups: str) -> str:
    common = set(groups[0])
    for group in groups[1:]:
        common &= set(group)
    if not common:
        raise NoSolutionError(f"No item shared by {len(groups)} groups")
    return min(common)


def solve_part_one(text: str) -> int:
    total = 0
    for sack in parse_rucksacks(text):
        half = len(sack) // 2
        total += priority(shared_item(sack[:half], sack[half:]))
    return total


def solve_part_two(text: str) -> int:
    sacks = parse_rucksacks(text)
    if len(sacks) % 3:
        raise PuzzleParseError(f"Expected groups of three elves, got {len(sacks)} rucksacks")
    return sum(
        priority(shared_item(*sacks[i:i + 3])) for i in range(0, len(sacks), 3)
    )
