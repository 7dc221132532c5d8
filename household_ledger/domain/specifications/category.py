"""Category specifications."""

from household_ledger.domain.enums import CategoryPurpose, TransactionType
from household_ledger.domain.value_objects import MAX_DESCRIPTION_LENGTH


def is_valid_purpose(purpose) -> bool:
    return isinstance(purpose, CategoryPurpose)


def has_valid_category_description(text) -> bool:
    return (
        isinstance(text, str)
        and bool(text.strip())
        and len(text) <= MAX_DESCRIPTION_LENGTH
    )


def can_be_used_with_transaction_type(purpose, transaction_type) -> bool:
    """
    Check whether a category purpose accepts a transaction type.

    Both accepts every type; Expense and Income accept only themselves.
    Any other combination, including values outside the enums, is refused.
    """
    if not isinstance(transaction_type, TransactionType):
        return False
    if purpose is CategoryPurpose.BOTH:
        return True
    if purpose is CategoryPurpose.EXPENSE:
        return transaction_type is TransactionType.EXPENSE
    if purpose is CategoryPurpose.INCOME:
        return transaction_type is TransactionType.INCOME
    return False
