"""
Transaction specifications.

Pure predicates over raw values. None of them construct aggregates or
raise: callers decide what a False means.
"""

from household_ledger.domain.enums import TransactionType
from household_ledger.domain.value_objects import MAX_DESCRIPTION_LENGTH, to_decimal


def is_valid_amount(amount) -> bool:
    """An amount is valid when it is a number strictly greater than zero."""
    value = to_decimal(amount)
    return value is not None and value > 0


def has_valid_description(text) -> bool:
    """Non-blank and at most 400 characters."""
    return (
        isinstance(text, str)
        and bool(text.strip())
        and len(text) <= MAX_DESCRIPTION_LENGTH
    )


def is_valid_transaction_type(transaction_type) -> bool:
    return isinstance(transaction_type, TransactionType)


def can_minor_create_income(is_minor: bool) -> bool:
    """Minors cannot register income; a guardian has to do it."""
    return not is_minor
