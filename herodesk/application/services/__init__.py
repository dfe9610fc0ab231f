"""
Application services.

Exports:
  - HeroService: Hero record client
  - MessageService, MessageSink: Operation message log
"""

from herodesk.application.services.hero_service import HeroService
from herodesk.application.services.message_service import MessageService, MessageSink

__all__ = ["HeroService", "MessageService", "MessageSink"]
