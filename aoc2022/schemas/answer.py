"""Answer Schemas - Pydantic models for the report of a solved day.

Invariants:
    - day is within 1-25, part within 1-2
    - elapsed_ms is never negative
    - A DayReport lists its answers in part order, without duplicates

Design Decisions:
    - int | str values: numeric answers stay numbers in JSON output
    - model_dump_json() is the --json wire format, no custom encoder
"""

from pydantic import BaseModel, Field, model_validator

from aoc2022.core.domain_types import FIRST_DAY, LAST_DAY


class PartAnswer(BaseModel):
    """Answer to one part of a day, with its solve time."""
    part: int = Field(ge=1, le=2)
    value: int | str
    elapsed_ms: float = Field(ge=0)


class DayReport(BaseModel):
    """Everything the CLI prints for one day."""
    day: int = Field(ge=FIRST_DAY, le=LAST_DAY)
    title: str
    input_path: str
    answers: list[PartAnswer] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_part_order(self) -> "DayReport":
        parts = [a.part for a in self.answers]
        if parts != sorted(set(parts)):
            raise ValueError("answers must be unique and ordered by part")
        return self

    def format_lines(self) -> list[str]:
        """Human-readable lines; multi-line answers start on their own line."""
        lines = []
        for answer in self.answers:
            label = f"Day {self.day:02d} part {answer.part}:"
            value = str(answer.value)
            if "\n" in value:
                lines.append(label)
                lines.extend(value.splitlines())
            else:
                lines.append(f"{label} {value}")
        return lines
