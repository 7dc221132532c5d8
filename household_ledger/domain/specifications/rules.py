"""
Transaction rule gate.

The single place where the transaction business rules are evaluated.
Both ``TransactionValidationService`` and ``Transaction.create`` go through
``enforce_transaction_rules`` so the two can never disagree on which rules
apply or in which order they are checked.

Order (first failure wins):
    1. amount > 0
    2. description non-blank and <= 400 chars (when required)
    3. type is Expense or Income
    4. a minor cannot register Income (unconditional)
    5. the category supports the type
"""

from household_ledger.domain.enums import TransactionType
from household_ledger.domain.exceptions import InvalidTransactionException

from .transaction import (
    can_minor_create_income,
    has_valid_description,
    is_valid_amount,
    is_valid_transaction_type,
)

REASON_AMOUNT = "amount"
REASON_DESCRIPTION = "description"
REASON_TYPE = "type"
REASON_MINOR_INCOME = "minor_income"
REASON_CATEGORY_MISMATCH = "category_mismatch"


def ensure_valid_amount(amount) -> None:
    if not is_valid_amount(amount):
        raise InvalidTransactionException(
            "amount must be greater than zero", reason=REASON_AMOUNT
        )


def ensure_valid_description(description) -> None:
    if not has_valid_description(description):
        raise InvalidTransactionException(
            "invalid or missing description", reason=REASON_DESCRIPTION
        )


def ensure_valid_type(transaction_type) -> None:
    if not is_valid_transaction_type(transaction_type):
        raise InvalidTransactionException(
            "invalid transaction type", reason=REASON_TYPE
        )


def ensure_minor_may_register(is_person_minor: bool, transaction_type) -> None:
    if transaction_type is TransactionType.INCOME and not can_minor_create_income(
        is_person_minor
    ):
        raise InvalidTransactionException(
            "minors cannot register income", reason=REASON_MINOR_INCOME
        )


def ensure_category_supports_type(category_supports_type: bool) -> None:
    if not category_supports_type:
        raise InvalidTransactionException(
            "category does not support this transaction type",
            reason=REASON_CATEGORY_MISMATCH,
        )


def enforce_transaction_rules(
    amount,
    transaction_type,
    is_person_minor: bool,
    category_supports_type: bool,
    description: str | None = None,
    require_description: bool = True,
) -> None:
    """
    Evaluate every transaction rule in order.

    Args:
        amount: Raw amount
        transaction_type: Expected to be a TransactionType member
        is_person_minor: Fact supplied by the caller from the person's age
        category_supports_type: Fact supplied by the caller from the category purpose
        description: Raw description
        require_description: Skip the description rule when False (the domain
            service validates before a description is known)

    Raises:
        InvalidTransactionException: On the first rule that fails
    """
    ensure_valid_amount(amount)
    if require_description:
        ensure_valid_description(description)
    ensure_valid_type(transaction_type)
    ensure_minor_may_register(is_person_minor, transaction_type)
    ensure_category_supports_type(category_supports_type)
