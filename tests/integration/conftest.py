"""
Fixtures for integration tests.

Provides:
- A shared in-memory store and event publisher
- Application services wired to the in-memory repositories
- Helpers that seed people and categories
"""

import pytest
import pytest_asyncio

from household_ledger.application.dto import (
    CategoryRequest,
    CategoryResponse,
    PersonRequest,
    PersonResponse,
)
from household_ledger.core.dependencies import LedgerServices, get_ledger_services
from household_ledger.infrastructure.events import InMemoryEventPublisher
from household_ledger.infrastructure.repositories import InMemoryStore


# =============================================================================
# Storage Fixtures
# =============================================================================

@pytest.fixture
def store() -> InMemoryStore:
    """A fresh set of tables for every test."""
    return InMemoryStore()


@pytest.fixture
def publisher() -> InMemoryEventPublisher:
    """Event publisher that remembers what it published."""
    return InMemoryEventPublisher()


@pytest.fixture
def services(store: InMemoryStore, publisher: InMemoryEventPublisher) -> LedgerServices:
    """Every application service sharing ``store`` and ``publisher``."""
    return get_ledger_services(store=store, event_publisher=publisher)


# =============================================================================
# Seed Data Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def adult(services: LedgerServices) -> PersonResponse:
    return await services.people.create_person(PersonRequest(name="Maria", age=34))


@pytest_asyncio.fixture
async def minor(services: LedgerServices) -> PersonResponse:
    return await services.people.create_person(PersonRequest(name="Lucas", age=16))


@pytest_asyncio.fixture
async def salary(services: LedgerServices) -> CategoryResponse:
    return await services.categories.create_category(
        CategoryRequest(description="Salary", purpose="Income")
    )


@pytest_asyncio.fixture
async def groceries(services: LedgerServices) -> CategoryResponse:
    return await services.categories.create_category(
        CategoryRequest(description="Groceries", purpose="Expense")
    )


@pytest_asyncio.fixture
async def misc(services: LedgerServices) -> CategoryResponse:
    return await services.categories.create_category(
        CategoryRequest(description="Miscellaneous", purpose="Both")
    )
