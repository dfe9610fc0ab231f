"""
In-memory web API server settings.

Dependencies: pydantic, pydantic_settings
System role: uvicorn bind configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from herodesk.configs.base import BaseSettings


class ServerSettings(BaseSettings):
    """uvicorn host/port for the in-memory web API."""

    model_config = SettingsConfigDict(env_prefix="HERODESK_SERVER_")

    host: str = Field(default="127.0.0.1", description="Bind address")
    port: int = Field(default=8000, description="Bind port")
