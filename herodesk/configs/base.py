"""
Shared settings base.

Every herodesk settings class reads the same ``.env`` file and only adds
its own env prefix on top of this config.

Dependencies: pydantic, pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Base configuration class; subclasses merge their env_prefix into model_config."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Root logging level handed to configure_logging()",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        """Upper-case the level name so "debug" and "DEBUG" both work."""
        return value.strip().upper()
