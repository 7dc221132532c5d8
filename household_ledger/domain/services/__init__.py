"""Domain Services - stateless rule evaluators."""

from .category_validation import CategoryValidationService
from .transaction_validation import TransactionValidationService

__all__ = [
    "CategoryValidationService",
    "TransactionValidationService",
]
