"""
Unit tests for the aggregation engine.

Test Categories:
- TestCalculateTotals: the core reduction
- TestGrouping: per-person and per-category totals
- TestTotalsModel: zero value and serialization
"""

import random
from decimal import Decimal

import pytest

from household_ledger.domain.aggregates import Transaction, TransactionType
from household_ledger.domain.exceptions import CurrencyMismatchError
from household_ledger.service.aggregation import (
    Totals,
    calculate_totals,
    global_totals,
    totals_by_category,
    totals_by_person,
    totals_for_category,
    totals_for_person,
)


# =============================================================================
# Helpers
# =============================================================================

_next_id = iter(range(1, 10_000))


def income(amount, person_id=1, category_id=1, currency=None) -> Transaction:
    return _build(amount, TransactionType.INCOME, person_id, category_id, currency)


def expense(amount, person_id=1, category_id=2, currency=None) -> Transaction:
    return _build(amount, TransactionType.EXPENSE, person_id, category_id, currency)


def _build(amount, transaction_type, person_id, category_id, currency) -> Transaction:
    transaction, _ = Transaction.create(
        amount=Decimal(amount),
        description="entry",
        type=transaction_type,
        category_id=category_id,
        person_id=person_id,
        is_person_minor=False,
        category_supports_type=True,
        id=next(_next_id),
        currency=currency,
    )
    return transaction


# =============================================================================
# Reduction
# =============================================================================

class TestCalculateTotals:

    def test_empty(self):
        totals = calculate_totals([])
        assert totals.total_income == Decimal("0")
        assert totals.total_expense == Decimal("0")
        assert totals.balance == Decimal("0")
        assert totals.currency is None
        assert totals.transaction_count == 0

    def test_household_scenario(self):
        """Salary 4500 minus 150.50 and 35.00 of expenses leaves 4314.50."""
        transactions = [income("4500"), expense("150.50"), expense("35.00")]

        totals = calculate_totals(transactions)

        assert totals.total_income == Decimal("4500")
        assert totals.total_expense == Decimal("185.50")
        assert totals.balance == Decimal("4314.50")
        assert totals.transaction_count == 3
        assert totals.currency == "BRL"

    def test_negative_balance(self):
        totals = calculate_totals([income("10"), expense("25.75")])
        assert totals.balance == Decimal("-15.75")

    def test_order_independent(self):
        transactions = [
            income("4500"),
            expense("150.50"),
            expense("35.00"),
            income("0.01"),
            expense("999.99"),
        ]
        expected = calculate_totals(transactions)

        shuffled = list(transactions)
        random.Random(7).shuffle(shuffled)

        assert calculate_totals(shuffled) == expected
        assert calculate_totals(reversed(transactions)) == expected

    def test_duplicates_counted(self):
        entry = expense("20")
        totals = calculate_totals([entry, entry])
        assert totals.total_expense == Decimal("40")
        assert totals.transaction_count == 2

    def test_cancelled_excluded(self):
        cancelled = expense("100")
        cancelled.cancel()

        totals = calculate_totals([income("300"), cancelled])

        assert totals.total_expense == Decimal("0")
        assert totals.balance == Decimal("300")
        assert totals.transaction_count == 1

    def test_currency_mismatch(self):
        with pytest.raises(CurrencyMismatchError):
            calculate_totals([income("10", currency="BRL"), expense("5", currency="USD")])

    def test_cancelled_other_currency_is_ignored(self):
        foreign = expense("5", currency="USD")
        foreign.cancel()
        totals = calculate_totals([income("10", currency="BRL"), foreign])
        assert totals.currency == "BRL"

    def test_accepts_generator(self):
        totals = calculate_totals(t for t in [income("1"), income("2")])
        assert totals.total_income == Decimal("3")

    def test_global_matches_calculate(self):
        transactions = [income("4500", person_id=1), expense("80", person_id=2)]
        assert global_totals(transactions) == calculate_totals(transactions)


# =============================================================================
# Grouping
# =============================================================================

class TestGrouping:

    @pytest.fixture
    def household(self):
        return [
            income("4500", person_id=1, category_id=10),
            expense("150.50", person_id=1, category_id=20),
            expense("35.00", person_id=2, category_id=20),
            income("200", person_id=2, category_id=10),
        ]

    def test_for_person(self, household):
        totals = totals_for_person(household, person_id=1)
        assert totals.balance == Decimal("4349.50")
        assert totals_for_person(household, person_id=99) == Totals.zero()

    def test_for_category(self, household):
        totals = totals_for_category(household, category_id=20)
        assert totals.total_expense == Decimal("185.50")
        assert totals.total_income == Decimal("0")

    def test_by_person(self, household):
        grouped = totals_by_person(household)
        assert set(grouped) == {1, 2}
        assert grouped[2].balance == Decimal("165.00")

    def test_by_category(self, household):
        grouped = totals_by_category(household)
        assert grouped[10].total_income == Decimal("4700")
        assert grouped[20].total_expense == Decimal("185.50")

    def test_groups_sum_to_global(self, household):
        grouped = totals_by_person(household)
        overall = global_totals(household)
        assert sum(t.balance for t in grouped.values()) == overall.balance
        assert sum(t.total_income for t in grouped.values()) == overall.total_income


# =============================================================================
# Model
# =============================================================================

class TestTotalsModel:

    def test_zero(self):
        zero = Totals.zero()
        assert zero.balance == Decimal("0")
        assert zero.transaction_count == 0

    def test_to_dict(self):
        totals = calculate_totals([income("4500"), expense("185.50")])
        assert totals.to_dict() == {
            "total_income": "4500",
            "total_expense": "185.50",
            "balance": "4314.50",
            "currency": "BRL",
            "transaction_count": 2,
        }
