"""
Shared test fixtures and configuration for entire test suite.

Provides: hero stores, message sinks, httpx mock transports
Dependencies: pytest, httpx
System role: Test infrastructure and fixture management
"""

from typing import Callable
from unittest.mock import AsyncMock

import httpx
import pytest

from herodesk.application.services import HeroService, MessageService
from herodesk.boundary.store import HttpHeroStore, InMemoryHeroStore
from herodesk.configs import HeroApiSettings

BASE_URL = "http://heroes.test"


@pytest.fixture
def api_settings() -> HeroApiSettings:
    """Provide endpoint settings independent of the environment."""
    return HeroApiSettings(
        base_url=BASE_URL,
        api_prefix="api",
        collection="heroes",
        timeout_seconds=5.0,
    )


@pytest.fixture
def messages() -> MessageService:
    """Provide empty message sink."""
    return MessageService()


@pytest.fixture
def memory_store() -> InMemoryHeroStore:
    """Provide in-memory store seeded with the mock heroes."""
    return InMemoryHeroStore()


@pytest.fixture
def mock_store() -> AsyncMock:
    """
    Provide mocked hero store.

    Returns:
        AsyncMock: Store whose async methods can be configured per test
    """
    store = AsyncMock()
    store.list_heroes = AsyncMock(return_value=[])
    store.find_by_id = AsyncMock(return_value=[])
    store.get_hero = AsyncMock()
    store.search_by_name = AsyncMock(return_value=[])
    store.create_hero = AsyncMock()
    store.update_hero = AsyncMock(return_value=None)
    store.delete_hero = AsyncMock(return_value=None)
    return store


@pytest.fixture
def hero_service(mock_store: AsyncMock, messages: MessageService) -> HeroService:
    """Provide HeroService over the mocked store."""
    return HeroService(store=mock_store, messages=messages)


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    """Collect requests seen by the mock transport."""
    return []


@pytest.fixture
def make_http_store(
    api_settings: HeroApiSettings,
    recorded_requests: list[httpx.Request],
) -> Callable[[Callable[[httpx.Request], httpx.Response]], HttpHeroStore]:
    """
    Provide factory building an HttpHeroStore over an httpx.MockTransport.

    Every request is appended to recorded_requests before the handler runs.
    """

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> HttpHeroStore:
        def recording_handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return handler(request)

        client = httpx.AsyncClient(
            base_url=api_settings.base_url,
            transport=httpx.MockTransport(recording_handler),
        )
        return HttpHeroStore(settings=api_settings, client=client)

    return factory

