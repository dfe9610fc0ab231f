"""
Hero service orchestrator.

Translates hero operations into hero store calls and normalizes failures:
every operation resolves to an OperationResult whose value is usable even
when the store failed, and reports its outcome on the message sink.

Dependencies: herodesk.boundary.store, herodesk.core, herodesk.observability
System role: Hero record client used by the UI layer
"""

from typing import Any, TypeVar

from herodesk.application.services.message_service import MessageSink
from herodesk.boundary.store.base_store import HeroStore
from herodesk.core.result import OperationResult
from herodesk.models.hero import CreateHeroRequest, Hero
from herodesk.observability import get_logger, log_exception_with_context

logger = get_logger(__name__)

T = TypeVar("T")


class HeroService:
    """Hero record client over a pluggable hero store."""

    def __init__(self, store: HeroStore, messages: MessageSink) -> None:
        """
        Initialize hero service with its collaborators.

        Args:
            store: In-memory or HTTP hero store
            messages: Sink receiving one message per operation
        """
        self.store = store
        self.messages = messages

    async def aclose(self) -> None:
        """Release store resources; stores without aclose() hold none."""
        aclose = getattr(self.store, "aclose", None)
        if aclose is not None:
            await aclose()

    async def __aenter__(self) -> "HeroService":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    def _log(self, message: str) -> None:
        self.messages.add(f"HeroService: {message}")

    def _handle_error(
        self, operation: str, error: Exception, default: T
    ) -> OperationResult[T]:
        """
        Record a failed operation and substitute its default value.

        Args:
            operation: Operation label used in the sink message
            error: Exception raised by the store
            default: Value handed back to the caller

        Returns:
            OperationResult: Failed result carrying default
        """
        log_exception_with_context(
            logger, "Hero operation failed", error, operation=operation
        )
        message = getattr(error, "message", None) or str(error)
        self._log(f"{operation} failed: {message}")
        return OperationResult.failure(error, default)

    async def get_heroes(self) -> OperationResult[list[Hero]]:
        """
        Fetch all heroes.

        Returns:
            OperationResult[list[Hero]]: Heroes, or an empty list on failure
        """
        try:
            heroes = list(await self.store.list_heroes())
        except Exception as e:
            return self._handle_error("get_heroes", e, [])

        self._log("fetched heroes")
        return OperationResult.success(heroes)

    async def get_hero_no_404(self, hero_id: int) -> OperationResult[Hero | None]:
        """
        Fetch a hero through the id filter.

        A missing hero is a successful lookup with value None.

        Args:
            hero_id: Hero id

        Returns:
            OperationResult[Hero | None]: Hero if one matched, None otherwise
        """
        try:
            matches = await self.store.find_by_id(hero_id)
        except Exception as e:
            return self._handle_error(f"get_hero id={hero_id}", e, None)

        hero = matches[0] if matches else None
        outcome = "fetched" if hero else "did not find"
        self._log(f"{outcome} hero id={hero_id}")
        return OperationResult.success(hero)

    async def get_hero(self, hero_id: int) -> OperationResult[Hero | None]:
        """
        Fetch a hero by resource path.

        A missing hero is a failed lookup with value None.

        Args:
            hero_id: Hero id

        Returns:
            OperationResult[Hero | None]: Hero, or None on failure
        """
        try:
            hero = await self.store.get_hero(hero_id)
        except Exception as e:
            return self._handle_error(f"get_hero id={hero_id}", e, None)

        self._log(f"fetched hero id={hero_id}")
        return OperationResult.success(hero)

    async def search_heroes(self, term: str) -> OperationResult[list[Hero]]:
        """
        Find heroes whose name contains term.

        Blank terms return an empty list without querying the store.

        Args:
            term: Name fragment, matched case-sensitively

        Returns:
            OperationResult[list[Hero]]: Matches, or an empty list on failure
        """
        if not term.strip():
            return OperationResult.success([])

        try:
            heroes = list(await self.store.search_by_name(term))
        except Exception as e:
            return self._handle_error("search_heroes", e, [])

        self._log(f'found heroes matching "{term}"')
        return OperationResult.success(heroes)

    async def add_hero(self, hero: CreateHeroRequest) -> OperationResult[Hero | None]:
        """
        Create a hero; the store assigns its id.

        Args:
            hero: New hero without id

        Returns:
            OperationResult[Hero | None]: Created hero, or None on failure
        """
        try:
            created = await self.store.create_hero(hero)
        except Exception as e:
            return self._handle_error("add_hero", e, None)

        self._log(f"added hero w/ id={created.id}")
        return OperationResult.success(created)

    async def update_hero(self, hero: Hero) -> OperationResult[None]:
        """
        Replace a stored hero.

        Args:
            hero: Full hero record including id

        Returns:
            OperationResult[None]: ok acknowledges the update
        """
        try:
            await self.store.update_hero(hero)
        except Exception as e:
            return self._handle_error("update_hero", e, None)

        self._log(f"updated hero id={hero.id}")
        return OperationResult.success(None)

    async def delete_hero(self, hero: Hero | int) -> OperationResult[None]:
        """
        Delete a hero given the hero itself or its id.

        Args:
            hero: Hero record or raw hero id

        Returns:
            OperationResult[None]: ok acknowledges the deletion
        """
        hero_id = hero if isinstance(hero, int) else hero.id

        try:
            await self.store.delete_hero(hero_id)
        except Exception as e:
            return self._handle_error("delete_hero", e, None)

        self._log(f"deleted hero id={hero_id}")
        return OperationResult.success(None)
