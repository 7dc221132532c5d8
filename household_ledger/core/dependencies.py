"""Dependency wiring for the application services."""

from dataclasses import dataclass
from typing import Optional

from household_ledger.application.services import (
    CategoryService,
    PersonService,
    SummaryService,
    TransactionService,
)
from household_ledger.core.logging import setup_logging
from household_ledger.domain.interfaces import DomainEventPublisher
from household_ledger.infrastructure.events import InMemoryEventPublisher
from household_ledger.infrastructure.repositories import (
    InMemoryCategoryRepository,
    InMemoryPersonRepository,
    InMemoryStore,
    InMemoryTransactionRepository,
)


@dataclass(frozen=True)
class LedgerServices:
    """Every application service, sharing one storage backend."""

    people: PersonService
    categories: CategoryService
    transactions: TransactionService
    summary: SummaryService


def get_ledger_services(
    store: Optional[InMemoryStore] = None,
    event_publisher: Optional[DomainEventPublisher] = None,
) -> LedgerServices:
    """
    Build the application services over the in-memory repositories.

    Configures logging on first use, like an application startup would.

    Args:
        store: Shared table store; a fresh one when omitted
        event_publisher: Where domain events go; in-memory when omitted
    """
    setup_logging()

    store = store if store is not None else InMemoryStore()
    publisher = event_publisher or InMemoryEventPublisher()

    person_repo = InMemoryPersonRepository(store)
    category_repo = InMemoryCategoryRepository(store)
    transaction_repo = InMemoryTransactionRepository(store)

    return LedgerServices(
        people=PersonService(
            person_repository=person_repo,
            transaction_repository=transaction_repo,
        ),
        categories=CategoryService(
            category_repository=category_repo,
            transaction_repository=transaction_repo,
            event_publisher=publisher,
        ),
        transactions=TransactionService(
            transaction_repository=transaction_repo,
            person_repository=person_repo,
            category_repository=category_repo,
            event_publisher=publisher,
        ),
        summary=SummaryService(transaction_repository=transaction_repo),
    )
