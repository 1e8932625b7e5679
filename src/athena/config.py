"""Runtime configuration for Athena."""

from enum import Enum

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    """Levels accepted by ``ATHENA_LOG_LEVEL`` and ``--log-level``."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="ATHENA_", env_file=".env", extra="ignore")

    app_name: str = "athena"
    log_level: LogLevel = LogLevel.WARNING
    catalog_path: str | None = Field(
        default=None,
        description="Optional JSON file with extra numeral systems appended after the built-ins.",
    )
    validation_probe_limit: int = Field(
        default=3999,
        ge=1,
        description="Additive symbol tables must reduce every value in 1..limit to zero at startup.",
    )
    puzzle_seed: int | None = Field(default=None, description="Seed for reproducible puzzle sequences.")
    conversion_max: int = Field(default=50, ge=1)
    sequence_start_max: int = Field(default=20, ge=1)
    sequence_step_max: int = Field(default=3, ge=1)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


settings = Settings()
