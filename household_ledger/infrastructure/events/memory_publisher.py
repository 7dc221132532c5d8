"""In-memory DomainEventPublisher."""

from typing import List, Sequence

import structlog

from household_ledger.domain.events import DomainEvent
from household_ledger.domain.interfaces import DomainEventPublisher

logger = structlog.get_logger(__name__)


class InMemoryEventPublisher(DomainEventPublisher):
    """Keeps published events in order and logs each one."""

    def __init__(self) -> None:
        self.published: List[DomainEvent] = []

    async def publish(self, events: Sequence[DomainEvent]) -> None:
        for event in events:
            self.published.append(event)
            logger.info("domain_event_published", **event.to_dict())
