"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a default: the runner works with no environment at all
    - get_settings() is cached (lru_cache), single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - AOC_ prefix keeps the variables out of the way of other tools
"""

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runner settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="AOC_", env_file=".env", case_sensitive=False,
    )

    # Inputs
    input_dir: Path = Path("data")
    input_filename: str = "{day:02d}_input.txt"

    # Observability
    log_level: str = "WARNING"
    log_format: str = "text"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("text", "json"):
            raise ValueError("log_format must be 'text' or 'json'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
