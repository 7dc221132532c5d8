"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .category import CategoryNotFoundException, InvalidCategoryException
from .person import InvalidPersonException, PersonNotFoundException
from .transaction import InvalidTransactionException, TransactionNotFoundException
from .value import CurrencyMismatchError, InvalidValueObjectError

__all__ = [
    "DomainException",
    "InvalidCategoryException",
    "CategoryNotFoundException",
    "InvalidPersonException",
    "PersonNotFoundException",
    "InvalidTransactionException",
    "TransactionNotFoundException",
    "InvalidValueObjectError",
    "CurrencyMismatchError",
]
