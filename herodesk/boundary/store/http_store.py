"""
HTTP hero store.

Maps hero store operations onto a REST-style collection resource
(``api/heroes`` by default) using an async httpx client.

Routes used:
- GET    <collection>             list all heroes
- GET    <collection>/?id=<id>    id filter (0 or 1 results)
- GET    <collection>/<id>        single hero by path
- GET    <collection>/?name=<t>   name filter
- POST   <collection>             create, body without id
- PUT    <collection>             full replacement, body with id
- DELETE <collection>/<id>        remove

Dependencies: httpx, pydantic, herodesk.configs
System role: Network-backed hero storage adapter
"""

import logging
from typing import Any, Sequence

import httpx
from pydantic import TypeAdapter, ValidationError

from herodesk.configs.hero_api import HeroApiSettings
from herodesk.core.exceptions import (
    RecordNotFoundError,
    StoreResponseError,
    StoreTransportError,
)
from herodesk.models.hero import CreateHeroRequest, Hero
from herodesk.observability import get_logger, log_with_context

logger = get_logger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}

_hero = TypeAdapter(Hero)
_hero_list = TypeAdapter(list[Hero])


class HttpHeroStore:
    """
    Hero store backed by an HTTP collection endpoint.

    The store closes its httpx client on aclose() only when it created
    the client itself.
    """

    def __init__(
        self,
        settings: HeroApiSettings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize HTTP store.

        Args:
            settings: Endpoint configuration (defaults to environment settings)
            client: Pre-built async client; one is created from settings if omitted
        """
        self.settings = settings or HeroApiSettings()
        self.heroes_url = self.settings.collection_url
        self._owns_client = client is None
        if client is None:
            client = httpx.AsyncClient(
                base_url=self.settings.base_url,
                timeout=self.settings.timeout_seconds,
            )
        self.client = client

    async def aclose(self) -> None:
        """Close the underlying client if this store created it."""
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "HttpHeroStore":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def _send(
        self,
        operation: str,
        method: str,
        url: str,
        hero_id: int | None = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Issue one request and map failures to store errors.

        Args:
            operation: Store operation name for error context
            method: HTTP method
            url: Path relative to the client base URL
            hero_id: Id addressed by the request, used for 404 mapping
            **kwargs: Passed through to httpx (params, json, headers)

        Returns:
            httpx.Response: Response with a 2xx status

        Raises:
            StoreTransportError: Network failure or timeout
            RecordNotFoundError: 404 for an id-addressed request
            StoreResponseError: Any other non-2xx status
        """
        try:
            response = await self.client.request(method, url, **kwargs)
        except httpx.RequestError as e:
            raise StoreTransportError(
                f"{method} {url} failed: {e}",
                operation=operation,
                details={"error_type": type(e).__name__},
            ) from e

        if response.status_code == httpx.codes.NOT_FOUND and hero_id is not None:
            raise RecordNotFoundError(hero_id, operation=operation)
        if response.is_error:
            raise StoreResponseError(
                f"{method} {url} returned {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
                operation=operation,
            )

        log_with_context(
            logger,
            logging.DEBUG,
            "Hero store request completed",
            operation=operation,
            method=method,
            url=response.request.url,
            status_code=response.status_code,
        )
        return response

    @staticmethod
    def _parse(response: httpx.Response, adapter: Any, operation: str) -> Any:
        try:
            return adapter.validate_python(response.json())
        except (ValueError, ValidationError) as e:
            raise StoreResponseError(
                f"Malformed hero payload: {e}",
                status_code=response.status_code,
                operation=operation,
            ) from e

    async def list_heroes(self) -> Sequence[Hero]:
        response = await self._send("list", "GET", self.heroes_url)
        return self._parse(response, _hero_list, "list")

    async def find_by_id(self, hero_id: int) -> Sequence[Hero]:
        response = await self._send(
            "find", "GET", f"{self.heroes_url}/", params={"id": hero_id}
        )
        return self._parse(response, _hero_list, "find")

    async def get_hero(self, hero_id: int) -> Hero:
        response = await self._send(
            "get", "GET", f"{self.heroes_url}/{hero_id}", hero_id=hero_id
        )
        return self._parse(response, _hero, "get")

    async def search_by_name(self, term: str) -> Sequence[Hero]:
        response = await self._send(
            "search", "GET", f"{self.heroes_url}/", params={"name": term}
        )
        return self._parse(response, _hero_list, "search")

    async def create_hero(self, request: CreateHeroRequest) -> Hero:
        response = await self._send(
            "create",
            "POST",
            self.heroes_url,
            json=request.model_dump(),
            headers=JSON_HEADERS,
        )
        return self._parse(response, _hero, "create")

    async def update_hero(self, hero: Hero) -> None:
        await self._send(
            "update",
            "PUT",
            self.heroes_url,
            hero_id=hero.id,
            json=hero.model_dump(),
            headers=JSON_HEADERS,
        )

    async def delete_hero(self, hero_id: int) -> None:
        await self._send(
            "delete",
            "DELETE",
            f"{self.heroes_url}/{hero_id}",
            hero_id=hero_id,
            headers=JSON_HEADERS,
        )
