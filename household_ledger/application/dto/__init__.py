"""Data Transfer Objects for application layer."""

from .category import CategoryRequest, CategoryResponse, CategoryWithTotalsResponse
from .person import PersonRequest, PersonResponse
from .summary import SummaryResponse
from .transaction import TransactionRequest, TransactionResponse

__all__ = [
    "CategoryRequest",
    "CategoryResponse",
    "CategoryWithTotalsResponse",
    "PersonRequest",
    "PersonResponse",
    "SummaryResponse",
    "TransactionRequest",
    "TransactionResponse",
]
