"""
Operation outcome wrapper.

Lets hero operations hand back a usable default value on failure while
still telling the caller that the operation failed.

Dependencies: dataclasses (stdlib)
System role: Success/failure variant returned by HeroService
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """
    Outcome of a single hero operation.

    Attributes:
        value: Store result on success, the operation's default on failure
        error: Captured exception on failure, None on success
    """

    value: T
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        """True when the operation succeeded."""
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "OperationResult[T]":
        """Build a successful result."""
        return cls(value=value)

    @classmethod
    def failure(cls, error: Exception, default: T) -> "OperationResult[T]":
        """Build a failed result carrying the operation's default value."""
        return cls(value=default, error=error)

    def unwrap(self) -> T:
        """
        Return the value or re-raise the captured error.

        Returns:
            T: Value of a successful result

        Raises:
            Exception: The error captured by a failed result
        """
        if self.error is not None:
            raise self.error
        return self.value
