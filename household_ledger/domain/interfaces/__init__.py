"""
Domain Interfaces (Ports)
"""

from .events import DomainEventPublisher
from .repositories import CategoryRepository, PersonRepository, TransactionRepository

__all__ = [
    "PersonRepository",
    "CategoryRepository",
    "TransactionRepository",
    "DomainEventPublisher",
]
