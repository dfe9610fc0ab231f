"""
Exception hierarchy for the hero record client.

Provides layered exception structure for store and transport errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class HeroDeskException(Exception):
    """Base exception for all herodesk errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class StoreError(HeroDeskException):
    """Raised when a hero store operation fails."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize store error.

        Args:
            message: Error message
            operation: Store operation that failed (list, get, create, ...)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class RecordNotFoundError(StoreError):
    """Raised when no hero exists for the requested id."""

    def __init__(
        self,
        hero_id: int,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize record not found error.

        Args:
            hero_id: ID of the missing hero
            operation: Store operation that failed
            details: Additional context
        """
        details = details or {}
        details["hero_id"] = hero_id
        self.hero_id = hero_id
        super().__init__(f"Hero not found: id={hero_id}", operation, details)


class StoreTransportError(StoreError):
    """Raised when the store cannot be reached."""

    pass


class StoreResponseError(StoreError):
    """Raised when the store answers with an error status or a malformed body."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize response error.

        Args:
            message: Error message
            status_code: HTTP status returned by the store, if any
            operation: Store operation that failed
            details: Additional context
        """
        details = details or {}
        if status_code is not None:
            details["status_code"] = status_code
        self.status_code = status_code
        super().__init__(message, operation, details)
