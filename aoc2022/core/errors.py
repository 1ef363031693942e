"""Error Hierarchy - typed, categorized exceptions for every puzzle failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory) and optional day
    - to_dict() produces the JSON envelope printed by the CLI in --json mode
    - Messages never include the full puzzle input (inputs can be large)

Design Decisions:
    - Single hierarchy with AocError base: the runner catches one type per day
    - ErrorContext as dataclass: rich logging extras without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    INPUT = "input"
    PARSE = "parse"
    NOT_FOUND = "not_found"
    NO_SOLUTION = "no_solution"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    day: int | None = None
    part: int | None = None


class AocError(Exception):
    """Base exception for all puzzle errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.context = context or ErrorContext()

    @property
    def day(self) -> int | None:
        return self.context.day

    def to_dict(self) -> dict:
        """Convert to the error envelope used by the CLI."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "day": self.context.day,
                    "part": self.context.part,
                },
            }
        }


# ─── Input Errors ───────────────────────────────────────────────

class PuzzleInputNotFoundError(AocError):
    """No input file exists for the requested day."""
    def __init__(self, day: int, searched: list[str], context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.day = day
        super().__init__(
            f"No input for day {day}: tried {', '.join(searched)}",
            "INPUT_NOT_FOUND", ErrorCategory.INPUT, ctx,
        )
        self.searched = searched


class PuzzleParseError(AocError):
    """A line of puzzle input does not match the expected format."""
    def __init__(self, message: str, line: str | None = None, context: ErrorContext | None = None):
        detail = f"{message}: {line!r}" if line is not None else message
        super().__init__(detail, "PARSE_ERROR", ErrorCategory.PARSE, context)
        self.line = line


# ─── Dispatch Errors ────────────────────────────────────────────

class UnknownDayError(AocError):
    """Requested day (or part of a day) has no registered solver."""
    def __init__(
        self, day: int, part: int | None = None, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.day = day
        ctx.part = part
        message = (
            f"Day {day} has no part {part}" if part is not None
            else f"Day {day} has no solver (expected 1-25)"
        )
        super().__init__(message, "UNKNOWN_DAY", ErrorCategory.NOT_FOUND, ctx)


# ─── Computation Errors ─────────────────────────────────────────

class NoSolutionError(AocError):
    """The puzzle input admits no answer (unreachable goal, missing marker, ...)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(message, "NO_SOLUTION", ErrorCategory.NO_SOLUTION, context)
