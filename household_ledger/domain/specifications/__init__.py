"""Specifications - pure predicates encoding one business rule each."""

from .category import (
    can_be_used_with_transaction_type,
    has_valid_category_description,
    is_valid_purpose,
)
from .rules import (
    REASON_AMOUNT,
    REASON_CATEGORY_MISMATCH,
    REASON_DESCRIPTION,
    REASON_MINOR_INCOME,
    REASON_TYPE,
    enforce_transaction_rules,
    ensure_category_supports_type,
    ensure_minor_may_register,
)
from .transaction import (
    can_minor_create_income,
    has_valid_description,
    is_valid_amount,
    is_valid_transaction_type,
)

__all__ = [
    # Transaction
    "is_valid_amount",
    "has_valid_description",
    "is_valid_transaction_type",
    "can_minor_create_income",
    # Category
    "is_valid_purpose",
    "has_valid_category_description",
    "can_be_used_with_transaction_type",
    # Rule gate
    "enforce_transaction_rules",
    "ensure_minor_may_register",
    "ensure_category_supports_type",
    "REASON_AMOUNT",
    "REASON_DESCRIPTION",
    "REASON_TYPE",
    "REASON_MINOR_INCOME",
    "REASON_CATEGORY_MISMATCH",
]
