"""Configuration for the label CLI.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)

Only the ambient stack (logging) is configured here. Label options come from
the command line and are captured in `LabelAddOptions`.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogFormat = Literal["json", "text"]


class LabelSettings(BaseSettings):
    """Settings for the label CLI.

    Environment variables:
    - LOG_LEVEL   (optional)
    - LOG_FORMAT  (optional; `json` or `text`)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `LabelSettings(_env_file=path_to_env)`.
    """

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )

    log_format: LogFormat = Field(
        default="json",
        validation_alias="LOG_FORMAT",
        description="Log output format",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown LOG_LEVEL: {value!r}")
        return level
