"""
Hero service factories.

Builds a HeroService over either the in-memory fixture store or the HTTP
store; the caller picks the backend.

Dependencies: herodesk.configs, herodesk.application, herodesk.boundary
System role: Composition root for the hero record client
"""

import httpx

from herodesk.application.services import HeroService, MessageService, MessageSink
from herodesk.boundary.store import HttpHeroStore, InMemoryHeroStore
from herodesk.configs import HeroApiSettings, get_settings


def create_mock_hero_service(messages: MessageSink | None = None) -> HeroService:
    """
    Get a hero service over a freshly seeded in-memory store.

    Args:
        messages: Message sink (a new MessageService if omitted)

    Returns:
        HeroService: Service backed by InMemoryHeroStore
    """
    return HeroService(
        store=InMemoryHeroStore(),
        messages=messages if messages is not None else MessageService(),
    )


def create_http_hero_service(
    messages: MessageSink | None = None,
    settings: HeroApiSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> HeroService:
    """
    Get a hero service talking to the configured collection endpoint.

    Args:
        messages: Message sink (a new MessageService if omitted)
        settings: Endpoint settings (defaults to application settings)
        client: Optional pre-built httpx client

    Returns:
        HeroService: Service backed by HttpHeroStore
    """
    store = HttpHeroStore(
        settings=settings or get_settings().hero_api,
        client=client,
    )
    return HeroService(
        store=store,
        messages=messages if messages is not None else MessageService(),
    )
