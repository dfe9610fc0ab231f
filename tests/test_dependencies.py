"""
Test suite for hero service factories.

System role: Verification of store selection
"""

import httpx
import pytest

from herodesk.application.services import HeroService, MessageService
from herodesk.boundary.store import HttpHeroStore, InMemoryHeroStore
from herodesk.configs import HeroApiSettings
from herodesk.dependencies import create_http_hero_service, create_mock_hero_service


class TestCreateMockHeroService:
    """Test suite for create_mock_hero_service."""

    def test_should_use_in_memory_store(self) -> None:
        service = create_mock_hero_service()

        assert isinstance(service, HeroService)
        assert isinstance(service.store, InMemoryHeroStore)
        assert isinstance(service.messages, MessageService)

    def test_should_use_given_sink(self) -> None:
        sink = MessageService()

        service = create_mock_hero_service(messages=sink)

        assert service.messages is sink


class TestCreateHttpHeroService:
    """Test suite for create_http_hero_service."""

    @pytest.mark.asyncio
    async def test_should_use_http_store_with_settings(self) -> None:
        settings = HeroApiSettings(base_url="http://api.test", collection="villains")

        service = create_http_hero_service(settings=settings)

        assert isinstance(service.store, HttpHeroStore)
        assert service.store.heroes_url == "api/villains"
        request = service.store.client.build_request("GET", service.store.heroes_url)
        assert str(request.url) == "http://api.test/api/villains"
        await service.aclose()
        assert service.store.client.is_closed

    @pytest.mark.asyncio
    async def test_should_use_given_client(self) -> None:
        client = httpx.AsyncClient(base_url="http://api.test")

        service = create_http_hero_service(client=client)

        assert service.store.client is client
        await client.aclose()

    @pytest.mark.asyncio
    async def test_context_manager_should_close_owned_client(self) -> None:
        """Test leaving the service context releases the client it created."""
        # Arrange
        settings = HeroApiSettings(base_url="http://api.test")

        # Act
        async with create_http_hero_service(settings=settings) as service:
            assert not service.store.client.is_closed

        # Assert
        assert service.store.client.is_closed

    @pytest.mark.asyncio
    async def test_context_manager_should_leave_injected_client_open(self) -> None:
        """Test a caller-owned client survives the service context."""
        # Arrange
        client = httpx.AsyncClient(base_url="http://api.test")

        # Act
        async with create_http_hero_service(client=client):
            pass

        # Assert
        assert not client.is_closed
        await client.aclose()


class TestMockHeroServiceClose:
    """Test suite for closing a service over the in-memory store."""

    @pytest.mark.asyncio
    async def test_context_manager_should_tolerate_store_without_aclose(self) -> None:
        async with create_mock_hero_service() as service:
            result = await service.get_heroes()

        assert len(result.value) == 10
