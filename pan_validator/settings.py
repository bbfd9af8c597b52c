"""
Central configuration for the PAN validator.
Every tunable is read from the environment (prefix ``PAN_``) with a default.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .rules import violates_format

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ValidatorSettings(BaseSettings):
    """Runtime configuration for the pipeline, CLI and API."""

    model_config = SettingsConfigDict(env_prefix="PAN_")

    # What an absent record normalizes to. Must never be a grammar-valid PAN.
    null_sentinel: str = Field(
        default="",
        description="Replacement for null/absent records before deduplication",
    )

    log_level: LogLevel = "INFO"

    # Upload cap for POST /validate/file
    max_upload_bytes: int = 1_048_576

    # CSV column holding the identifiers; None means the first column
    csv_column: Optional[str] = None

    @field_validator("null_sentinel")
    @classmethod
    def _sentinel_fails_format(cls, value: str) -> str:
        if not violates_format(value):
            raise ValueError(
                f"null_sentinel {value!r} is a well-formed PAN; "
                "absent records would be counted as real identifiers"
            )
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


def get_settings() -> ValidatorSettings:
    """Build settings from the current environment."""
    return ValidatorSettings()
