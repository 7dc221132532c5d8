"""Application services (use cases)."""

from .category_service import CategoryService
from .person_service import PersonService
from .summary_service import SummaryService
from .transaction_service import TransactionService

__all__ = [
    "CategoryService",
    "PersonService",
    "SummaryService",
    "TransactionService",
]
