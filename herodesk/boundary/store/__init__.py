"""
Hero store adapters.

Exports:
  - HeroStore: Protocol both stores satisfy
  - InMemoryHeroStore: Fixture store seeded with the mock heroes
  - HttpHeroStore: httpx-backed store for a REST collection endpoint
  - HEROES: Mock hero seed data
"""

from herodesk.boundary.store.base_store import HeroStore
from herodesk.boundary.store.http_store import HttpHeroStore
from herodesk.boundary.store.memory_store import InMemoryHeroStore
from herodesk.boundary.store.mock_heroes import HEROES

__all__ = ["HEROES", "HeroStore", "HttpHeroStore", "InMemoryHeroStore"]
