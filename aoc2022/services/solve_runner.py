"""Solve Runner - imperative shell around the pure day solvers.

Invariants:
    - Reads each input file exactly once per day, then runs every part on it
    - Each part is timed on its own (perf_counter, milliseconds)
    - AocError is logged with error_code/day extras and re-raised unchanged
    - Unexpected exceptions propagate untouched (no catch-all)

Design Decisions:
    - Runner owns IO and timing so day modules stay pure and testable with strings
    - available_days() scans the input directory, so "run everything" skips
      days whose input has not been downloaded yet
"""

import logging
import time
from pathlib import Path

from aoc2022.config import Settings
from aoc2022.core.domain_types import FIRST_DAY, LAST_DAY
from aoc2022.core.errors import AocError, PuzzleInputNotFoundError
from aoc2022.infrastructure.input_store import find_input, read_input
from aoc2022.schemas.answer import DayReport, PartAnswer
from aoc2022.services.puzzle_dispatch import get_puzzle

logger = logging.getLogger(__name__)


def solve_text(day: int, text: str, input_path: str = "<memory>") -> DayReport:
    """Run every registered part of a day over already-loaded input text."""
    puzzle = get_puzzle(day)
    answers = []
    for part, solver in sorted(puzzle.parts.items()):
        started = time.perf_counter()
        try:
            value = solver(text)
        except AocError as e:
            e.context.day = day
            e.context.part = int(part)
            logger.error(
                f"Day {day} part {int(part)} failed: {e.message}",
                extra={"day": day, "part": int(part), "error_code": e.code},
            )
            raise
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"Solved day {day} part {int(part)}",
            extra={"day": day, "part": int(part), "elapsed_ms": round(elapsed_ms, 3)},
        )
        answers.append(PartAnswer(part=int(part), value=value, elapsed_ms=elapsed_ms))
    return DayReport(day=day, title=puzzle.title, input_path=input_path, answers=answers)


def run_day(day: int, settings: Settings) -> DayReport:
    """Locate, read and solve one day's input."""
    get_puzzle(day)
    try:
        path = find_input(settings.input_dir, day, settings.input_filename)
    except PuzzleInputNotFoundError as e:
        logger.error(
            f"Input for day {day} not found",
            extra={"day": day, "error_code": e.code},
        )
        raise
    text = read_input(path)
    logger.info("Loaded puzzle input", extra={"day": day, "input_path": str(path)})
    return solve_text(day, text, str(path))


def available_days(settings: Settings) -> list[int]:
    """Days whose input file is present in the input directory."""
    days = []
    for day in range(FIRST_DAY, LAST_DAY + 1):
        try:
            find_input(settings.input_dir, day, settings.input_filename)
        except PuzzleInputNotFoundError:
            continue
        days.append(day)
    return days


def input_dir_exists(settings: Settings) -> bool:
    return Path(settings.input_dir).is_dir()
