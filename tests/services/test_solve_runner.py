"""Solve Runner - reading, solving and timing whole days.

Tests cover:
    - solve_text runs every part in order and times it
    - run_day reads from the configured directory, including the bare-name fallback
    - Errors are re-raised with day and part filled in
    - available_days lists only days with an input file
"""

import logging

import pytest

from aoc2022.config import Settings
from aoc2022.core.errors import NoSolutionError, PuzzleInputNotFoundError, UnknownDayError
from aoc2022.services.solve_runner import available_days, input_dir_exists, run_day, solve_text

CALORIES = "1000\n2000\n3000\n\n4000\n\n5000\n6000\n\n7000\n8000\n9000\n\n10000"


def _settings(path) -> Settings:
    return Settings(input_dir=path, _env_file=None)


def test_solve_text_reports_both_parts():
    report = solve_text(1, CALORIES)
    assert report.title == "Calorie Counting"
    assert report.input_path == "<memory>"
    assert [(a.part, a.value) for a in report.answers] == [(1, 24000), (2, 45000)]
    assert all(a.elapsed_ms >= 0 for a in report.answers)


def test_solve_text_day_25_reports_one_part():
    report = solve_text(25, "1=\n2")
    assert [(a.part, a.value) for a in report.answers] == [(1, "10")]


def test_solve_text_fills_error_context(caplog):
    with caplog.at_level(logging.ERROR), pytest.raises(NoSolutionError) as exc:
        solve_text(6, "aaaaaaaa")
    assert (exc.value.context.day, exc.value.context.part) == (6, 1)
    assert any(getattr(r, "error_code", None) == "NO_SOLUTION" for r in caplog.records)


def test_run_day_reads_input_file(tmp_path):
    (tmp_path / "01_input.txt").write_text(CALORIES + "\n")
    report = run_day(1, _settings(tmp_path))
    assert report.input_path == str(tmp_path / "01_input.txt")
    assert report.answers[0].value == 24000


def test_run_day_uses_bare_filename_fallback(tmp_path):
    (tmp_path / "1_input.txt").write_text(CALORIES)
    assert run_day(1, _settings(tmp_path)).answers[1].value == 45000


def test_run_day_missing_input(tmp_path):
    with pytest.raises(PuzzleInputNotFoundError):
        run_day(2, _settings(tmp_path))


def test_run_day_unknown_day_checked_before_input(tmp_path):
    with pytest.raises(UnknownDayError):
        run_day(26, _settings(tmp_path))


def test_available_days(tmp_path):
    for name in ("01_input.txt", "3_input.txt", "25_input.txt", "notes.txt"):
        (tmp_path / name).write_text("x")
    assert available_days(_settings(tmp_path)) == [1, 3, 25]


def test_available_days_missing_directory(tmp_path):
    settings = _settings(tmp_path / "absent")
    assert available_days(settings) == []
    assert not input_dir_exists(settings)
