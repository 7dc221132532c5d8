"""
Integration tests for the category use cases.

These tests verify:
1. Categories are registered with their purpose and publish CategoryCreated
2. Descriptions are unique regardless of case
3. Listings are ordered by description and can carry totals
4. Categories in use cannot be deleted
"""

from decimal import Decimal

import pytest

from household_ledger.application.dto import CategoryRequest, TransactionRequest
from household_ledger.domain.events import CategoryCreated
from household_ledger.domain.exceptions import (
    CategoryNotFoundException,
    InvalidCategoryException,
)


class TestCategoryRegistration:

    @pytest.mark.asyncio
    async def test_create_category(self, services, publisher):
        response = await services.categories.create_category(
            CategoryRequest(description=" Rent ", purpose="Expense")
        )

        assert response.id == 1
        assert response.description == "Rent"
        assert response.purpose == "Expense"

        assert len(publisher.published) == 1
        event = publisher.published[0]
        assert isinstance(event, CategoryCreated)
        assert event.category_id == response.id

    @pytest.mark.parametrize(
        "raw,expected",
        [(0, "Expense"), (1, "Income"), (2, "Both"), ("both", "Both"), ("INCOME", "Income")],
    )
    @pytest.mark.asyncio
    async def test_purpose_formats(self, services, raw, expected):
        response = await services.categories.create_category(
            CategoryRequest(description="Any", purpose=raw)
        )
        assert response.purpose == expected

    @pytest.mark.parametrize("raw", ["Savings", 3, -1, None])
    @pytest.mark.asyncio
    async def test_invalid_purpose(self, services, publisher, raw):
        with pytest.raises(InvalidCategoryException, match="purpose"):
            await services.categories.create_category(
                CategoryRequest(description="Any", purpose=raw)
            )
        assert publisher.published == []

    @pytest.mark.asyncio
    async def test_blank_description(self, services):
        with pytest.raises(InvalidCategoryException):
            await services.categories.create_category(
                CategoryRequest(description="   ", purpose="Both")
            )

    @pytest.mark.asyncio
    async def test_duplicate_description_any_case(self, services, publisher, groceries):
        with pytest.raises(InvalidCategoryException, match="already exists"):
            await services.categories.create_category(
                CategoryRequest(description="GROCERIES", purpose="Both")
            )
        assert len(publisher.published) == 1


class TestCategoryListing:

    @pytest.mark.asyncio
    async def test_ordered_by_description(self, services, salary, groceries, misc):
        listed = await services.categories.list_categories()
        assert [c.description for c in listed] == ["Groceries", "Miscellaneous", "Salary"]

    @pytest.mark.asyncio
    async def test_with_totals(self, services, adult, salary, groceries, misc):
        await services.transactions.create_transaction(
            TransactionRequest("4500", "Salary", "Income", salary.id, adult.id)
        )
        await services.transactions.create_transaction(
            TransactionRequest("150.50", "Market", "Expense", groceries.id, adult.id)
        )
        await services.transactions.create_transaction(
            TransactionRequest("35.00", "Bakery", "Expense", groceries.id, adult.id)
        )

        listed = {c.description: c for c in await services.categories.list_categories_with_totals()}

        assert listed["Salary"].total_income == Decimal("4500")
        assert listed["Groceries"].total_expense == Decimal("185.50")
        assert listed["Groceries"].balance == Decimal("-185.50")
        assert listed["Miscellaneous"].balance == Decimal("0")

    @pytest.mark.asyncio
    async def test_get_missing(self, services):
        with pytest.raises(CategoryNotFoundException):
            await services.categories.get_category(3)


class TestCategoryDeletion:

    @pytest.mark.asyncio
    async def test_delete_unused(self, services, store, misc):
        await services.categories.delete_category(misc.id)
        assert store.categories == {}

    @pytest.mark.asyncio
    async def test_delete_in_use_is_refused(self, services, store, adult, groceries):
        await services.transactions.create_transaction(
            TransactionRequest(10, "Bread", "Expense", groceries.id, adult.id)
        )

        with pytest.raises(InvalidCategoryException, match="still has transactions"):
            await services.categories.delete_category(groceries.id)

        assert groceries.id in store.categories

    @pytest.mark.asyncio
    async def test_delete_missing(self, services):
        with pytest.raises(CategoryNotFoundException):
            await services.categories.delete_category(5)
