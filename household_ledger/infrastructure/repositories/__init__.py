"""Repository implementations."""

from .category_repository import InMemoryCategoryRepository
from .person_repository import InMemoryPersonRepository
from .records import CategoryRecord, PersonRecord, TransactionRecord
from .store import InMemoryStore
from .transaction_repository import InMemoryTransactionRepository

__all__ = [
    "InMemoryStore",
    "InMemoryPersonRepository",
    "InMemoryCategoryRepository",
    "InMemoryTransactionRepository",
    "PersonRecord",
    "CategoryRecord",
    "TransactionRecord",
]
