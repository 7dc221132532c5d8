"""Transaction domain events."""

from dataclasses import dataclass
from decimal import Decimal

from .base import DomainEvent


@dataclass(frozen=True)
class TransactionCreated(DomainEvent):
    """Raised when a new transaction is registered."""

    transaction_id: int
    person_id: int
    category_id: int
    amount: Decimal
    currency: str
    type: str
    description: str

    def to_dict(self) -> dict:
        return {
            **super().to_dict(),
            "transaction_id": self.transaction_id,
            "person_id": self.person_id,
            "category_id": self.category_id,
            "amount": str(self.amount),
            "currency": self.currency,
            "type": self.type,
            "description": self.description,
        }
