"""API routers."""

from .health import router as health_router
from .heroes import router as heroes_router

__all__ = ["health_router", "heroes_router"]
