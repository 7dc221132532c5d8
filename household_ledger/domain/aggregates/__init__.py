"""Aggregates - entities with identity whose invariants live in their factories."""

from household_ledger.domain.enums import CategoryPurpose, TransactionType

from .category import Category
from .person import Person
from .transaction import Transaction

__all__ = [
    "Category",
    "CategoryPurpose",
    "Person",
    "Transaction",
    "TransactionType",
]
