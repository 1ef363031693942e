"""Root conftest - shared test configuration."""

import logging
import os

import pytest

from aoc2022.config import get_settings

# Ensure tests never pick up a developer's real puzzle inputs or .env overrides
os.environ.setdefault("AOC_INPUT_DIR", "tests-no-such-input-dir")
os.environ.setdefault("AOC_LOG_LEVEL", "WARNING")


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _restore_root_logger():
    handlers, level = list(logging.root.handlers), logging.root.level
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)
