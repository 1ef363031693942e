"""Input Store - locates and reads the puzzle input file of a day.

Invariants:
    - The zero-padded name (01_input.txt) is tried before the bare one (1_input.txt)
    - Missing inputs raise PuzzleInputNotFoundError, never FileNotFoundError
    - Text is returned as-is: leading whitespace is significant for some days
"""

import logging
from pathlib import Path

from aoc2022.core.errors import PuzzleInputNotFoundError

logger = logging.getLogger(__name__)

FALLBACK_FILENAME = "{day}_input.txt"


def candidate_paths(input_dir: Path, day: int, filename: str) -> list[Path]:
    """Paths searched for a day's input, in priority order."""
    input_dir = Path(input_dir)
    paths = [input_dir / filename.format(day=day)]
    fallback = input_dir / FALLBACK_FILENAME.format(day=day)
    if fallback not in paths:
        paths.append(fallback)
    return paths


def find_input(input_dir: Path, day: int, filename: str = "{day:02d}_input.txt") -> Path:
    """Return the first existing input path for the day."""
    paths = candidate_paths(input_dir, day, filename)
    for path in paths:
        if path.is_file():
            return path
    raise PuzzleInputNotFoundError(day, [str(p) for p in paths])


def read_input(path: Path) -> str:
    """Read an input file, dropping only the trailing newline(s)."""
    text = path.read_text(encoding="utf-8")
    logger.debug("Read puzzle input", extra={"input_path": str(path)})
    return text.rstrip("\n")
