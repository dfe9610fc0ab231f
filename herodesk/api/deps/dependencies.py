"""
Dependency injection for the in-memory web API.

Dependencies: fastapi, herodesk.boundary.store
System role: DI providers for route handlers
"""

from fastapi import Request

from herodesk.boundary.store.base_store import HeroStore


def get_hero_store(request: Request) -> HeroStore:
    """
    Get the hero store attached to the running app.

    Args:
        request: Incoming request

    Returns:
        HeroStore: Store created by create_app()
    """
    return request.app.state.hero_store
