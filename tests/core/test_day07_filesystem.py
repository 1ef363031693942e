"""Day 7 tests - directory tree reconstruction from a terminal log."""

import pytest

from aoc2022.core.day07_filesystem import (
    parse_terminal, directory_sizes, solve_part_one, solve_part_two,
)
from aoc2022.core.errors import PuzzleParseError

EXAMPLE = "\n".join([
    "$ cd /",
    "$ ls",
    "dir a",
    "14848514 b.txt",
    "8504156 c.dat",
    "dir d",
    "$ cd a",
    "$ ls",
    "dir e",
    "29116 f",
    "2557 g",
    "62596 h.lst",
    "$ cd e",
    "$ ls",
    "584 i",
    "$ cd ..",
    "$ cd ..",
    "$ cd d",
    "$ ls",
    "4060174 j",
    "8033020 d.log",
    "5626152 d.ext",
    "7214296 k",
])


def test_directory_sizes_are_recursive():
    root = parse_terminal(EXAMPLE)
    assert root.size() == 48381165
    assert root.dirs["a"].size() == 94853
    assert root.dirs["a"].dirs["e"].size() == 584
    assert root.dirs["d"].size() == 24933642


def test_part_one_example():
    assert solve_part_one(EXAMPLE) == 95437


def test_part_two_example():
    assert solve_part_two(EXAMPLE) == 24933642


def test_listing_a_directory_twice_does_not_double_count():
    log = "$ cd /\n$ ls\n10 a\n$ ls\n10 a"
    assert directory_sizes(parse_terminal(log)) == [10]


def test_unknown_command_raises_parse_error():
    with pytest.raises(PuzzleParseError):
        parse_terminal("$ rm -rf /")
