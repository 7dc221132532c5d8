"""Event publishing interface."""

from abc import ABC, abstractmethod
from typing import Sequence

from household_ledger.domain.events import DomainEvent


class DomainEventPublisher(ABC):
    """
    Hands domain events to whoever is interested.

    The domain never publishes by itself: factories return their events
    and the application layer passes them here exactly once.
    """

    @abstractmethod
    async def publish(self, events: Sequence[DomainEvent]) -> None:
        ...
