"""API-specific dependencies."""

from .dependencies import get_hero_store

__all__ = ["get_hero_store"]
