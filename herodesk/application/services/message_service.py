"""
Message sink.

Collects the human-readable messages HeroService emits for every
completed or failed operation.

Dependencies: typing
System role: Operation message log shown to the user
"""

from typing import Protocol


class MessageSink(Protocol):
    """Receives one message per hero operation."""

    def add(self, message: str) -> None:
        ...


class MessageService:
    """In-memory message sink."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def add(self, message: str) -> None:
        """Append a message."""
        self.messages.append(message)

    def clear(self) -> None:
        """Drop all collected messages."""
        self.messages = []
