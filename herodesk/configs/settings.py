"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from herodesk.configs.base import BaseSettings
from herodesk.configs.hero_api import HeroApiSettings
from herodesk.configs.server import ServerSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    hero_api: HeroApiSettings = HeroApiSettings()
    server: ServerSettings = ServerSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from herodesk.configs import get_settings
        settings = get_settings()
    """
    return Settings()
