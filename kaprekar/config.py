"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache), one instance per process
    - sample_values are not range-checked here: on_invalid decides in the driver

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all settings: `kaprekar` works with no environment at all
    - KAPREKAR_ prefix: avoids clashing with generic LOG_LEVEL variables
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from kaprekar.core.domain_types import (
    DEFAULT_SAFETY_LIMIT, SAMPLE_VALUES, InvalidInputPolicy,
)


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="KAPREKAR_", env_file=".env", case_sensitive=False,
    )

    # Routine
    safety_limit: int = Field(default=DEFAULT_SAFETY_LIMIT, ge=1)
    sample_values: list[int] = list(SAMPLE_VALUES)
    on_invalid: InvalidInputPolicy = InvalidInputPolicy.ABORT

    # Observability
    log_level: str = "INFO"
    log_format: str = "text"


@lru_cache
def get_settings() -> Settings:
    return Settings()
