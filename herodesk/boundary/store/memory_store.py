"""
In-memory hero store.

Holds the hero collection in a dict keyed by id. Serves as the fixture
backend for HeroService and as the data layer of the in-memory web API.

Dependencies: herodesk.models, herodesk.core
System role: Non-persistent hero storage
"""

import logging
from typing import Iterable, Sequence

from herodesk.boundary.store.mock_heroes import FIRST_HERO_ID, HEROES
from herodesk.core.exceptions import RecordNotFoundError
from herodesk.models.hero import CreateHeroRequest, Hero
from herodesk.observability import get_logger, log_with_context

logger = get_logger(__name__)


class InMemoryHeroStore:
    """
    Hero collection kept in process memory.

    Every returned hero is a copy, so callers cannot change stored state
    without going through the store.

    Attributes:
        seed: Heroes the store starts from and returns to on reset()
    """

    def __init__(self, heroes: Iterable[Hero] | None = None) -> None:
        """
        Initialize store with seed heroes.

        Args:
            heroes: Initial collection (defaults to the mock heroes)
        """
        self.seed = [h.model_copy() for h in (HEROES if heroes is None else heroes)]
        self._heroes: dict[int, Hero] = {}
        self.reset()

    def reset(self) -> None:
        """Restore the seed collection."""
        self._heroes = {h.id: h.model_copy() for h in self.seed}
        log_with_context(
            logger, logging.DEBUG, "In-memory hero store reset", count=len(self._heroes)
        )

    def _gen_id(self) -> int:
        if not self._heroes:
            return FIRST_HERO_ID
        return max(self._heroes) + 1

    def _require(self, hero_id: int, operation: str) -> Hero:
        hero = self._heroes.get(hero_id)
        if hero is None:
            raise RecordNotFoundError(hero_id, operation=operation)
        return hero

    async def list_heroes(self) -> Sequence[Hero]:
        return [h.model_copy() for h in self._heroes.values()]

    async def find_by_id(self, hero_id: int) -> Sequence[Hero]:
        hero = self._heroes.get(hero_id)
        return [hero.model_copy()] if hero is not None else []

    async def get_hero(self, hero_id: int) -> Hero:
        return self._require(hero_id, "get").model_copy()

    async def search_by_name(self, term: str) -> Sequence[Hero]:
        # Case-sensitive substring match
        return [h.model_copy() for h in self._heroes.values() if term in h.name]

    async def create_hero(self, request: CreateHeroRequest) -> Hero:
        hero = Hero(id=self._gen_id(), name=request.name)
        self._heroes[hero.id] = hero
        log_with_context(logger, logging.INFO, "Hero created", hero=hero)
        return hero.model_copy()

    async def update_hero(self, hero: Hero) -> None:
        self._require(hero.id, "update")
        self._heroes[hero.id] = hero.model_copy()
        log_with_context(logger, logging.INFO, "Hero updated", hero=hero)

    async def delete_hero(self, hero_id: int) -> None:
        self._require(hero_id, "delete")
        del self._heroes[hero_id]
        log_with_context(logger, logging.INFO, "Hero deleted", hero_id=hero_id)
