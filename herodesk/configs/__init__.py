"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from herodesk.configs.hero_api import HeroApiSettings
from herodesk.configs.server import ServerSettings
from herodesk.configs.settings import Settings, get_settings

__all__ = ["HeroApiSettings", "ServerSettings", "Settings", "get_settings"]
