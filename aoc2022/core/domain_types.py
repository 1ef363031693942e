"""Domain Types - small shared vocabulary for the runner and the CLI.

Invariants:
    - Days are numbered FIRST_DAY..LAST_DAY inclusive
    - Answer is either an integer or a string (crate tops, SNAFU numbers, CRT pictures)

Design Decisions:
    - int Enum for PuzzlePart: serializes to the bare part number
"""

from enum import IntEnum
from typing import Union


FIRST_DAY: int = 1
LAST_DAY: int = 25


Answer = Union[int, str]


class PuzzlePart(IntEnum):
    """The two questions asked over each day's input."""
    ONE = 1
    TWO = 2
