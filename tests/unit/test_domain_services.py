"""Unit tests for the domain services."""

import pytest

from household_ledger.domain.enums import CategoryPurpose, TransactionType
from household_ledger.domain.exceptions import (
    InvalidCategoryException,
    InvalidTransactionException,
)
from household_ledger.domain.services import (
    CategoryValidationService,
    TransactionValidationService,
)


@pytest.fixture
def category_validation() -> CategoryValidationService:
    return CategoryValidationService()


@pytest.fixture
def transaction_validation() -> TransactionValidationService:
    return TransactionValidationService()


class TestCategoryValidationService:

    def test_supports_transaction_type(self, category_validation):
        assert category_validation.supports_transaction_type(
            CategoryPurpose.BOTH, TransactionType.INCOME
        )
        assert not category_validation.supports_transaction_type(
            CategoryPurpose.EXPENSE, TransactionType.INCOME
        )

    def test_validate_creation_ok(self, category_validation):
        category_validation.validate_category_creation("Salary", CategoryPurpose.INCOME)

    def test_validate_creation_bad_description(self, category_validation):
        with pytest.raises(InvalidCategoryException, match="description"):
            category_validation.validate_category_creation("  ", CategoryPurpose.INCOME)

    def test_validate_creation_bad_purpose(self, category_validation):
        with pytest.raises(InvalidCategoryException, match="purpose"):
            category_validation.validate_category_creation("Salary", "Savings")


class TestTransactionValidationService:

    def _validate(self, service, **overrides):
        params = dict(
            amount=100,
            transaction_type=TransactionType.EXPENSE,
            category_id=1,
            person_id=1,
            is_person_minor=False,
            category_supports_type=True,
        )
        params.update(overrides)
        service.validate_transaction_creation(**params)

    def test_valid(self, transaction_validation):
        self._validate(transaction_validation)

    def test_amount_first(self, transaction_validation):
        with pytest.raises(InvalidTransactionException) as exc:
            self._validate(transaction_validation, amount=0, transaction_type="x")
        assert exc.value.reason == "amount"

    def test_type(self, transaction_validation):
        with pytest.raises(InvalidTransactionException) as exc:
            self._validate(transaction_validation, transaction_type="Transfer")
        assert exc.value.reason == "type"

    def test_minor_income(self, transaction_validation):
        with pytest.raises(InvalidTransactionException) as exc:
            self._validate(
                transaction_validation,
                transaction_type=TransactionType.INCOME,
                is_person_minor=True,
            )
        assert exc.value.reason == "minor_income"
        assert exc.value.code == "INVALID_TRANSACTION"

    def test_same_order_as_aggregate(self, transaction_validation):
        """Minor rule wins over category mismatch, as in Transaction.create."""
        with pytest.raises(InvalidTransactionException) as exc:
            self._validate(
                transaction_validation,
                transaction_type=TransactionType.INCOME,
                is_person_minor=True,
                category_supports_type=False,
            )
        assert exc.value.reason == "minor_income"

    def test_minor_expense_allowed(self, transaction_validation):
        self._validate(transaction_validation, is_person_minor=True)

    def test_business_rules(self, transaction_validation):
        transaction_validation.validate_business_rules(
            False, TransactionType.INCOME, True
        )
        with pytest.raises(InvalidTransactionException) as exc:
            transaction_validation.validate_business_rules(
                False, TransactionType.INCOME, False
            )
        assert exc.value.reason == "category_mismatch"
