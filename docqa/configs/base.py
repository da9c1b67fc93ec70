"""
Shared pieces of the docqa configuration.

Every settings group reads the process environment first and then an
optional .env file in the working directory. Variable names are matched
case-insensitively, and unrelated variables in the environment are ignored.

Dependencies: pydantic, pydantic_settings
System role: Common source rules and process-level settings
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def env_config(prefix: str = "") -> SettingsConfigDict:
    """Settings source rules for one group of variables sharing a prefix."""
    return SettingsConfigDict(
        env_prefix=prefix,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class ServiceSettings(BaseSettings):
    """Process-level settings read once at startup."""

    model_config = env_config()

    environment: str = Field(
        default="development",
        description="Deployment name reported in the startup log line",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level handed to configure_logging",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level
