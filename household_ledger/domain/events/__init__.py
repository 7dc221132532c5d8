"""Domain Events."""

from .base import DomainEvent, utc_now
from .category import CategoryCreated
from .transaction import TransactionCreated

__all__ = [
    "DomainEvent",
    "CategoryCreated",
    "TransactionCreated",
    "utc_now",
]
