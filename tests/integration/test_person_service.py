"""
Integration tests for the person use cases.

These tests verify:
1. People are registered, renamed and deleted through the service
2. Duplicate names are refused
3. Totals and transaction counts come from stored transactions
4. Deleting a person removes their transactions
"""

from decimal import Decimal

import pytest

from household_ledger.application.dto import PersonRequest, TransactionRequest
from household_ledger.domain.exceptions import (
    InvalidPersonException,
    PersonNotFoundException,
)


# =============================================================================
# Create / Update
# =============================================================================

class TestPersonRegistration:

    @pytest.mark.asyncio
    async def test_create_person(self, services):
        response = await services.people.create_person(
            PersonRequest(name="  Maria  ", age=34)
        )

        assert response.id == 1
        assert response.name == "Maria"
        assert response.age == 34
        assert response.is_minor is False
        assert response.transaction_count == 0
        assert response.balance == Decimal("0")

    @pytest.mark.asyncio
    async def test_ids_are_sequential(self, services):
        first = await services.people.create_person(PersonRequest(name="A", age=1))
        second = await services.people.create_person(PersonRequest(name="B", age=2))
        assert (first.id, second.id) == (1, 2)

    @pytest.mark.asyncio
    async def test_invalid_age_is_refused(self, services, store):
        with pytest.raises(InvalidPersonException):
            await services.people.create_person(PersonRequest(name="Ana", age=151))
        assert store.people == {}

    @pytest.mark.asyncio
    async def test_duplicate_name_is_refused(self, services, adult):
        with pytest.raises(InvalidPersonException, match="already exists"):
            await services.people.create_person(PersonRequest(name="Maria", age=50))

    @pytest.mark.asyncio
    async def test_update_person(self, services, minor):
        response = await services.people.update_person(
            minor.id, PersonRequest(name="Lucas Silva", age=18)
        )

        assert response.name == "Lucas Silva"
        assert response.is_minor is False
        assert (await services.people.get_person(minor.id)).age == 18

    @pytest.mark.asyncio
    async def test_update_to_existing_name(self, services, adult, minor):
        with pytest.raises(InvalidPersonException, match="already exists"):
            await services.people.update_person(
                minor.id, PersonRequest(name="Maria", age=16)
            )

    @pytest.mark.asyncio
    async def test_update_keeping_own_name(self, services, adult):
        response = await services.people.update_person(
            adult.id, PersonRequest(name="Maria", age=35)
        )
        assert response.age == 35

    @pytest.mark.asyncio
    async def test_update_missing_person(self, services):
        with pytest.raises(PersonNotFoundException):
            await services.people.update_person(99, PersonRequest(name="X", age=1))


# =============================================================================
# Reads
# =============================================================================

class TestPersonTotals:

    @pytest.mark.asyncio
    async def test_get_person_with_totals(self, services, adult, salary, groceries):
        await services.transactions.create_transaction(
            TransactionRequest("4500", "Salary", "Income", salary.id, adult.id)
        )
        await services.transactions.create_transaction(
            TransactionRequest("150.50", "Market", "Expense", groceries.id, adult.id)
        )

        response = await services.people.get_person(adult.id)

        assert response.transaction_count == 2
        assert response.total_income == Decimal("4500")
        assert response.total_expense == Decimal("150.50")
        assert response.balance == Decimal("4349.50")

    @pytest.mark.asyncio
    async def test_get_missing_person(self, services):
        with pytest.raises(PersonNotFoundException) as exc:
            await services.people.get_person(42)
        assert exc.value.code == "PERSON_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_list_people(self, services, adult, minor, groceries):
        await services.transactions.create_transaction(
            TransactionRequest(50, "Lunch", "Expense", groceries.id, minor.id)
        )

        people = {p.name: p for p in await services.people.list_people()}

        assert set(people) == {"Maria", "Lucas"}
        assert people["Maria"].transaction_count == 0
        assert people["Maria"].balance == Decimal("0")
        assert people["Lucas"].transaction_count == 1
        assert people["Lucas"].balance == Decimal("-50")


# =============================================================================
# Delete
# =============================================================================

class TestPersonDeletion:

    @pytest.mark.asyncio
    async def test_delete_cascades_to_transactions(
        self, services, store, adult, minor, groceries
    ):
        await services.transactions.create_transaction(
            TransactionRequest(80, "Market", "Expense", groceries.id, adult.id)
        )
        kept = await services.transactions.create_transaction(
            TransactionRequest(20, "Snack", "Expense", groceries.id, minor.id)
        )

        await services.people.delete_person(adult.id)

        assert adult.id not in store.people
        assert list(store.transactions) == [kept.id]
        summary = await services.summary.get_global_summary()
        assert summary.total_expense == Decimal("20")

    @pytest.mark.asyncio
    async def test_delete_missing_person(self, services):
        with pytest.raises(PersonNotFoundException):
            await services.people.delete_person(7)
