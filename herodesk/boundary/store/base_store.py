"""
Hero store interface.

One capability interface implemented by the in-memory fixture store and the
HTTP-backed store. HeroService is written against this protocol only.

Dependencies: typing
System role: Contract between the record client and its backing store
"""

from typing import Protocol, Sequence

from herodesk.models.hero import CreateHeroRequest, Hero


class HeroStore(Protocol):
    """
    Async hero collection operations.

    Implementations raise herodesk.core.exceptions.StoreError subclasses
    on failure and never return partial results.
    """

    async def list_heroes(self) -> Sequence[Hero]:
        """Return every hero in the collection."""
        ...

    async def find_by_id(self, hero_id: int) -> Sequence[Hero]:
        """Query with an id filter; returns zero or one hero."""
        ...

    async def get_hero(self, hero_id: int) -> Hero:
        """Return the hero at collection/{id}; RecordNotFoundError when absent."""
        ...

    async def search_by_name(self, term: str) -> Sequence[Hero]:
        """Return heroes whose name contains term."""
        ...

    async def create_hero(self, request: CreateHeroRequest) -> Hero:
        """Store a new hero and return it with its assigned id."""
        ...

    async def update_hero(self, hero: Hero) -> None:
        """Replace the stored hero that has hero.id."""
        ...

    async def delete_hero(self, hero_id: int) -> None:
        """Remove the hero at collection/{id}."""
        ...
