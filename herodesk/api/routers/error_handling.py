"""
Hero store error handling for API endpoints.

Provides a decorator translating store exceptions into HTTPExceptions
so every hero route reports failures the same way.
"""

import functools
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from herodesk.core.exceptions import RecordNotFoundError, StoreError
from herodesk.observability import get_logger

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def handle_store_errors(func: F) -> F:
    """
    Decorator mapping store errors to HTTP status codes.

    - RecordNotFoundError -> 404
    - any other StoreError -> 500
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except RecordNotFoundError as e:
            logger.warning(
                "Hero not found",
                extra={"hero_id": e.hero_id, "error": str(e)}
            )
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=e.message
            )

        except StoreError as e:
            logger.error(
                "Hero store operation failed",
                extra={"error": str(e)}
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=e.message
            )

    return wrapper  # type: ignore
