"""Event publisher implementations."""

from .memory_publisher import InMemoryEventPublisher

__all__ = ["InMemoryEventPublisher"]
