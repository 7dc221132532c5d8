"""
Domain layer: value objects, specifications, domain services and aggregates.

Framework-agnostic and synchronous. Nothing here persists state or
publishes events; the application layer does both.
"""

from .exceptions import (
    DomainException,
    InvalidCategoryException,
    InvalidPersonException,
    InvalidTransactionException,
    InvalidValueObjectError,
)
from .enums import CategoryPurpose, TransactionType
from .value_objects import Age, CategoryDescription, Money, PersonName
from .aggregates import Category, Person, Transaction
from .services import CategoryValidationService, TransactionValidationService

__all__ = [
    # Exceptions
    "DomainException",
    "InvalidCategoryException",
    "InvalidPersonException",
    "InvalidTransactionException",
    "InvalidValueObjectError",
    # Enums
    "CategoryPurpose",
    "TransactionType",
    # Value Objects
    "Age",
    "CategoryDescription",
    "Money",
    "PersonName",
    # Aggregates
    "Category",
    "Person",
    "Transaction",
    # Domain Services
    "CategoryValidationService",
    "TransactionValidationService",
]
