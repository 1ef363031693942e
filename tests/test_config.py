"""Settings - defaults and AOC_ environment overrides."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from aoc2022.config import Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("AOC_INPUT_DIR", raising=False)
    monkeypatch.delenv("AOC_LOG_LEVEL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.input_dir == Path("data")
    assert settings.input_filename == "{day:02d}_input.txt"
    assert settings.log_level == "WARNING"
    assert settings.log_format == "text"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("AOC_INPUT_DIR", "/tmp/puzzles")
    monkeypatch.setenv("AOC_LOG_FORMAT", "JSON")
    settings = Settings(_env_file=None)
    assert settings.input_dir == Path("/tmp/puzzles")
    assert settings.log_format == "json"


def test_unknown_log_format_rejected(monkeypatch):
    monkeypatch.setenv("AOC_LOG_FORMAT", "xml")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
