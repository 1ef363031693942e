"""AoC 2022 CLI - command-line entry point that prints each day's answers.

Invariants:
    - Answers go to stdout, logs and error messages go to stderr
    - A failing day never stops the remaining days; the exit status reports it
    - Settings come from the environment; --input-dir overrides AOC_INPUT_DIR

Design Decisions:
    - argparse: a handful of flags, no need for a CLI framework
    - Two error layers: AocError (expected puzzle/input failures) is reported
      per day, anything else propagates with its traceback
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from aoc2022.config import Settings, get_settings
from aoc2022.core.domain_types import FIRST_DAY, LAST_DAY
from aoc2022.core.errors import AocError
from aoc2022.infrastructure.observability import setup_logging
from aoc2022.services.solve_runner import available_days, input_dir_exists, run_day

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aoc2022", description="Print the answers to Advent of Code 2022 puzzles.",
    )
    parser.add_argument(
        "days", nargs="*", type=int, metavar="DAY",
        help=f"days to solve ({FIRST_DAY}-{LAST_DAY}); default: every day with an input file",
    )
    parser.add_argument("--input-dir", help="directory holding NN_input.txt files")
    parser.add_argument("--json", action="store_true", help="print one JSON report per day")
    return parser


def main(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = settings or get_settings()
    if args.input_dir:
        settings = settings.model_copy(update={"input_dir": Path(args.input_dir)})
    setup_logging(settings.log_level, settings.log_format)

    days = args.days or available_days(settings)
    if not days:
        if not input_dir_exists(settings):
            logger.warning(f"Input directory {settings.input_dir} does not exist")
        print(f"No puzzle inputs found in {settings.input_dir}", file=sys.stderr)
        return 1

    status = 0
    for day in days:
        try:
            report = run_day(day, settings)
        except AocError as e:
            status = 1
            if args.json:
                print(json.dumps(e.to_dict()))
            else:
                print(f"Day {day:02d}: {e.message}", file=sys.stderr)
            continue
        if args.json:
            print(report.model_dump_json())
        else:
            print("\n".join(report.format_lines()))
    return status
